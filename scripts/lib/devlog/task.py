"""Task line parsing.

One task per physical line, identified by its first character:

    * <text>   to do
    ^ <text>   started
    - <text>   blocked
    + <text>   done

Anything else (blank lines, prose, indented markers) is not a task.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TaskStatus(Enum):
    TODO = "todo"
    STARTED = "started"
    BLOCKED = "blocked"
    DONE = "done"

    @property
    def marker(self) -> str:
        return STATUS_TO_MARKER[self]

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


MARKER_TO_STATUS = {
    '*': TaskStatus.TODO,
    '^': TaskStatus.STARTED,
    '-': TaskStatus.BLOCKED,
    '+': TaskStatus.DONE,
}
STATUS_TO_MARKER = {v: k for k, v in MARKER_TO_STATUS.items()}

DISPLAY_NAMES = {
    TaskStatus.TODO: "To Do",
    TaskStatus.STARTED: "Started",
    TaskStatus.BLOCKED: "Blocked",
    TaskStatus.DONE: "Done",
}


@dataclass(frozen=True)
class Task:
    """A single task line."""

    status: TaskStatus
    text: str

    def render(self) -> str:
        """Format the task as a devlog line (without newline)."""
        if not self.text:
            return self.status.marker
        return f"{self.status.marker} {self.text}"

    def __str__(self) -> str:
        return self.render()


def parse_line(line: str) -> Task | None:
    """
    Parse a single devlog line.

    Args:
        line: Raw line, with or without its trailing newline

    Returns:
        Task, or None if the line does not start with a marker
    """
    if not line:
        return None

    status = MARKER_TO_STATUS.get(line[0])
    if status is None:
        return None

    return Task(status=status, text=line[1:].strip())
