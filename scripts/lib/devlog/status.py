"""Status views of recent log files."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError, NoSuchLogError
from .logfile import LogFile
from .repository import LogPath, LogRepository
from .task import Task, TaskStatus

SHOW_CHOICES = ("all", "todo", "started", "blocked", "done")
EMPTY_SECTION = "(none)"


def parse_show(value: str) -> TaskStatus | None:
    """Map a --show value to a status filter (None means all statuses)."""
    key = value.strip().lower()
    if key == "all":
        return None
    try:
        return TaskStatus(key)
    except ValueError:
        raise InvalidArgumentError(
            f"show must be one of: {', '.join(SHOW_CHOICES)}"
        ) from None


@dataclass(frozen=True)
class StatusReport:
    logpath: LogPath
    sections: tuple[tuple[TaskStatus, tuple[Task, ...]], ...]

    def render(self) -> str:
        blocks = []
        for status, tasks in self.sections:
            lines = [f"{status.display_name}:"]
            if tasks:
                lines.extend(task.render() for task in tasks)
            else:
                lines.append(EMPTY_SECTION)
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks) + "\n"


def select_log(repo: LogRepository, back: int) -> LogPath:
    """The log file `back` steps before the latest one (0 = latest)."""
    if back < 0:
        raise InvalidArgumentError("back must be >= 0")

    logpaths = repo.tail(back + 1)
    if len(logpaths) <= back:
        if not logpaths:
            raise NoSuchLogError(f"No devlog files found in {repo.path}")
        raise NoSuchLogError(
            f"Cannot go back {back} devlog(s): only {len(logpaths)} available"
        )
    return logpaths[back]


def collect(repo: LogRepository, back: int = 0, show: TaskStatus | None = None) -> StatusReport:
    """
    Collect the tasks of one log file, grouped by status.

    Args:
        repo: Log repository
        back: How many files before the latest to inspect
        show: Single status to include, or None for all four

    Raises:
        NoSuchLogError: If fewer than back + 1 log files exist
    """
    logpath = select_log(repo, back)
    groups = LogFile.load(logpath.path).group_by_status()

    statuses = list(TaskStatus) if show is None else [show]
    sections = tuple((status, tuple(groups[status])) for status in statuses)
    return StatusReport(logpath=logpath, sections=sections)
