"""
Devlog configuration.

Configuration via environment variables:
- DEVLOG_REPO: Path to the devlog repository (default: ~/devlogs)
- DEVLOG_EDITOR: Editor program used by `devlog edit` (default: nano)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_EDITOR = "nano"


def _default_repo_dir() -> Path:
    return Path.home() / "devlogs"


@dataclass(frozen=True)
class Config:
    repo_dir: Path
    editor_prog: str

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> Config:
        env = os.environ if environ is None else environ

        raw_repo = env.get("DEVLOG_REPO", "").strip()
        repo_dir = Path(raw_repo).expanduser() if raw_repo else _default_repo_dir()

        editor_prog = env.get("DEVLOG_EDITOR", "").strip() or DEFAULT_EDITOR
        return cls(repo_dir=repo_dir, editor_prog=editor_prog)
