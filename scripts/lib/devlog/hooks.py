"""
Hooks: user-supplied executables run around devlog commands.

Hooks live in the `hooks` subdirectory of the repository. A hook is active
only while its file is executable; `init_hooks` writes disabled templates.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, TextIO

logger = logging.getLogger(__name__)

HOOK_DIR_NAME = "hooks"

HOOK_TEMPLATE = """#!/usr/bin/env sh
# To enable this hook, make this file executable.
echo "$0 $@"
"""


class HookType(Enum):
    # Argument: path to the devlog entry file.
    BEFORE_EDIT = "before-edit"
    # Argument: path to the devlog entry file. Runs only if the editor succeeds.
    AFTER_EDIT = "after-edit"
    # Argument: path to the devlog entry file being rolled over.
    BEFORE_ROLLOVER = "before-rollover"
    # Arguments: old devlog entry file, new devlog entry file.
    AFTER_ROLLOVER = "after-rollover"


def hook_dir_path(repo_dir: Path) -> Path:
    return Path(repo_dir) / HOOK_DIR_NAME


def hook_path(repo_dir: Path, hook_type: HookType) -> Path:
    return hook_dir_path(repo_dir) / hook_type.value


def is_executable(path: Path) -> bool:
    """True if `path` is a file with any execute bit set."""
    return path.is_file() and os.stat(path).st_mode & 0o111 != 0


def init_hooks(repo_dir: Path) -> None:
    """Create disabled template hooks, keeping any that already exist."""
    hook_dir = hook_dir_path(repo_dir)
    hook_dir.mkdir(parents=True, exist_ok=True)
    for hook_type in HookType:
        path = hook_dir / hook_type.value
        if not path.exists():
            path.write_text(HOOK_TEMPLATE, encoding="utf-8")


def hook_command(
    repo_dir: Path,
    hook_type: HookType,
    is_enabled: Callable[[Path], bool] = is_executable,
) -> Path | None:
    """Path of the hook to run, or None if the hook is disabled or missing."""
    path = hook_path(repo_dir, hook_type)
    if not is_enabled(path):
        logger.debug("Hook %s not enabled", hook_type.value)
        return None
    return path


def execute_hook(
    repo_dir: Path,
    hook_type: HookType,
    *args: Path | str,
    out: TextIO | None = None,
    is_enabled: Callable[[Path], bool] = is_executable,
) -> int | None:
    """
    Run a hook in the foreground if it is enabled.

    A failing hook is reported to `out` but is not an error.

    Returns:
        The hook's return code, or None if the hook was not run
    """
    out = out or sys.stdout
    cmd = hook_command(repo_dir, hook_type, is_enabled)
    if cmd is None:
        return None

    out.flush()
    result = subprocess.run([str(cmd), *(str(a) for a in args)], check=False)
    if result.returncode > 0:
        print(f"{hook_type.value} hook exited with status {result.returncode}", file=out)
    elif result.returncode < 0:
        print(f"{hook_type.value} hook terminated by signal {-result.returncode}", file=out)
    return result.returncode
