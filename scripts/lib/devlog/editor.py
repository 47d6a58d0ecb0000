"""Open a devlog file in a text editor program (e.g. vim or nano)."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import TextIO

from .config import Config
from .hooks import HookType, execute_hook


def open_in_editor(config: Config, path: Path, out: TextIO | None = None) -> bool:
    """
    Run the configured editor on `path`.

    Returns:
        True if the editor exited successfully
    """
    out = out or sys.stdout
    out.flush()
    result = subprocess.run([config.editor_prog, str(path)], check=False)
    if result.returncode == 0:
        return True

    if result.returncode > 0:
        print(f"Command `{config.editor_prog} {path}` exited with status {result.returncode}", file=out)
    else:
        print("Process terminated by signal", file=out)
    return False


def open_log(config: Config, path: Path, out: TextIO | None = None) -> bool:
    """Open `path` in the editor, running the before-edit and after-edit hooks."""
    execute_hook(config.repo_dir, HookType.BEFORE_EDIT, path, out=out)
    ok = open_in_editor(config, path, out=out)
    if ok:
        execute_hook(config.repo_dir, HookType.AFTER_EDIT, path, out=out)
    return ok
