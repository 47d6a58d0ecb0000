"""Carry unfinished work from a log file into a new one."""

from __future__ import annotations

import logging

from .logfile import LogFile
from .repository import LogPath, LogRepository
from .task import Task, TaskStatus

logger = logging.getLogger(__name__)

# Started tasks are not carried: only blocked or not-yet-begun items survive.
CARRY_STATUSES = (TaskStatus.TODO, TaskStatus.BLOCKED)


def carried_tasks(logfile: LogFile) -> list[Task]:
    """Tasks that roll over into the next file, in their original order."""
    return [t for t in logfile.tasks if t.status in CARRY_STATUSES]


def render_tasks(tasks: list[Task]) -> str:
    return "".join(f"{task.render()}\n" for task in tasks)


def rollover(repo: LogRepository, logpath: LogPath) -> tuple[LogPath, int]:
    """
    Create the next log file seeded with the to-do and blocked tasks of `logpath`.

    The source file is only read. The new file is written atomically and is
    created even when nothing is carried.

    Returns:
        Tuple of (new log path, number of carried tasks)
    """
    logfile = LogFile.load(logpath.path)
    tasks = carried_tasks(logfile)

    new_logpath = repo.create(render_tasks(tasks))
    logger.debug("Rolled over %d of %d tasks from %s", len(tasks), len(logfile.tasks), logpath.name)
    return new_logpath, len(tasks)
