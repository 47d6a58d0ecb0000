"""Tests for configuration loading."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "scripts" / "lib"))

from devlog.config import Config


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config.load({})
    assert config.repo_dir == tmp_path / "devlogs"
    assert config.editor_prog == "nano"


def test_from_environment(tmp_path):
    config = Config.load({"DEVLOG_REPO": str(tmp_path / "logs"), "DEVLOG_EDITOR": "vim"})
    assert config.repo_dir == tmp_path / "logs"
    assert config.editor_prog == "vim"


def test_blank_values_use_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config.load({"DEVLOG_REPO": "  ", "DEVLOG_EDITOR": ""})
    assert config.repo_dir == tmp_path / "devlogs"
    assert config.editor_prog == "nano"


def test_reads_os_environ_by_default(monkeypatch, tmp_path):
    monkeypatch.setenv("DEVLOG_REPO", str(tmp_path))
    monkeypatch.delenv("DEVLOG_EDITOR", raising=False)
    assert Config.load().repo_dir == tmp_path


def test_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert Config.load({"DEVLOG_REPO": "~/work-logs"}).repo_dir == tmp_path / "work-logs"
