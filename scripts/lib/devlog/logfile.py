"""Load and parse a devlog entry file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .task import Task, TaskStatus, parse_line

logger = logging.getLogger(__name__)

FENCE = "```"


def parse_tasks(content: str) -> list[Task]:
    """
    Parse tasks from devlog content, in file order.

    Rules:
    - Lines between ``` fences are free-form and never parsed
    - An unterminated fence exempts the rest of the content
    - Lines without a marker are ignored
    - Only a newline character ends a line; form feeds and other breaks stay in it
    """
    tasks = []
    in_code_block = False

    for line in content.split("\n"):
        line = line.rstrip("\r")
        if line.strip().startswith(FENCE):
            in_code_block = not in_code_block
            continue

        if in_code_block:
            continue

        task = parse_line(line)
        if task is not None:
            tasks.append(task)

    if in_code_block:
        logger.debug("Unterminated code fence; rest of content skipped")

    return tasks


@dataclass(frozen=True)
class LogFile:
    """Parsed tasks of a devlog entry file."""

    tasks: tuple[Task, ...]
    path: Path | None = None

    @classmethod
    def load(cls, path: Path) -> LogFile:
        """Load and parse the devlog entry file at `path`."""
        content = Path(path).read_text(encoding="utf-8", errors="replace")
        tasks = parse_tasks(content)
        logger.debug("Parsed %d tasks from %s", len(tasks), path)
        return cls(tasks=tuple(tasks), path=Path(path))

    def group_by_status(self) -> dict[TaskStatus, list[Task]]:
        """Group tasks by status; every status is present, file order kept."""
        groups: dict[TaskStatus, list[Task]] = {status: [] for status in TaskStatus}
        for task in self.tasks:
            groups[task.status].append(task)
        return groups
