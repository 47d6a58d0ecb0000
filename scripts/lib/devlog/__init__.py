"""devlog: dated developer logs with rollover of unfinished tasks."""

from .errors import (
    DevlogError,
    InvalidArgumentError,
    LogFileLimitExceeded,
    LogNotFoundError,
    NoSuchLogError,
)
from .logfile import LogFile, parse_tasks
from .repository import LogPath, LogRepository
from .rollover import rollover
from .status import StatusReport, collect, parse_show
from .task import Task, TaskStatus, parse_line

__version__ = "1.0.0"

__all__ = [
    "DevlogError",
    "InvalidArgumentError",
    "LogFile",
    "LogFileLimitExceeded",
    "LogNotFoundError",
    "LogPath",
    "LogRepository",
    "NoSuchLogError",
    "StatusReport",
    "Task",
    "TaskStatus",
    "collect",
    "parse_line",
    "parse_show",
    "parse_tasks",
    "rollover",
]
