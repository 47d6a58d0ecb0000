"""Tests for hook discovery and execution."""

import io
import os
import stat
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts" / "lib"))

from devlog.hooks import (
    HOOK_DIR_NAME,
    HOOK_TEMPLATE,
    HookType,
    execute_hook,
    hook_command,
    hook_path,
    init_hooks,
)

pytestmark = pytest.mark.skipif(os.name != "posix", reason="hooks rely on execute permissions")


def _write_hook(repo_dir, hook_type, body, executable=True):
    path = hook_path(repo_dir, hook_type)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/usr/bin/env sh\n{body}\n")
    if executable:
        path.chmod(0o755)
    return path


def test_init_hooks(tmp_path):
    init_hooks(tmp_path)

    # Initially, all hooks are disabled
    for hook_type in HookType:
        assert hook_path(tmp_path, hook_type).read_text() == HOOK_TEMPLATE
        assert hook_command(tmp_path, hook_type) is None

    # Enable them by updating permissions
    for hook_type in HookType:
        path = hook_path(tmp_path, hook_type)
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        assert hook_command(tmp_path, hook_type) == path


def test_init_hooks_keeps_existing(tmp_path):
    existing = tmp_path / HOOK_DIR_NAME / "after-edit"
    existing.parent.mkdir()
    existing.write_text("existing hook")

    init_hooks(tmp_path)

    for hook_type in HookType:
        assert hook_path(tmp_path, hook_type).exists()
    assert existing.read_text() == "existing hook"


def test_hook_dir_does_not_exist(tmp_path):
    assert hook_command(tmp_path, HookType.BEFORE_EDIT) is None


def test_hook_not_executable(tmp_path):
    _write_hook(tmp_path, HookType.BEFORE_EDIT, "exit 0", executable=False)
    assert hook_command(tmp_path, HookType.BEFORE_EDIT) is None
    assert execute_hook(tmp_path, HookType.BEFORE_EDIT, "x", out=io.StringIO()) is None


def test_hook_capability_is_injectable(tmp_path):
    assert hook_command(tmp_path, HookType.AFTER_EDIT, is_enabled=lambda p: True) == (
        tmp_path / HOOK_DIR_NAME / "after-edit"
    )


def test_execute_hook_passes_arguments(tmp_path):
    record = tmp_path / "record.txt"
    _write_hook(tmp_path, HookType.AFTER_ROLLOVER, f'echo "$1|$2" > "{record}"')

    out = io.StringIO()
    rc = execute_hook(tmp_path, HookType.AFTER_ROLLOVER, tmp_path / "old", tmp_path / "new", out=out)

    assert rc == 0
    assert record.read_text().strip() == f"{tmp_path / 'old'}|{tmp_path / 'new'}"
    assert out.getvalue() == ""


def test_execute_hook_failure_is_reported(tmp_path):
    _write_hook(tmp_path, HookType.BEFORE_ROLLOVER, "exit 3")

    out = io.StringIO()
    rc = execute_hook(tmp_path, HookType.BEFORE_ROLLOVER, "x", out=out)

    assert rc == 3
    assert out.getvalue() == "before-rollover hook exited with status 3\n"


def test_execute_hook_signal_is_reported(tmp_path):
    _write_hook(tmp_path, HookType.BEFORE_EDIT, "kill -TERM $$")

    out = io.StringIO()
    rc = execute_hook(tmp_path, HookType.BEFORE_EDIT, "x", out=out)

    assert rc < 0
    assert "before-edit hook terminated by signal" in out.getvalue()
