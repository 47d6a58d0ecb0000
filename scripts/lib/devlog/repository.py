"""
Devlog repository: a directory of dated log files.

Log files are named ``YYYY-MM-DD-NNN.devlog``. ``NNN`` is a zero-padded
sequence number within the date, so sorting names lexically sorts them
chronologically. Other files in the directory (including ``hooks/``) are
ignored.
"""

from __future__ import annotations

import logging
import os
import re
import tempfile
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path

from .errors import InvalidArgumentError, LogFileLimitExceeded

logger = logging.getLogger(__name__)

LOG_SUFFIX = ".devlog"
LOG_NAME_RE = re.compile(r"(\d{4}-\d{2}-\d{2})-(\d{3})\.devlog")
MAX_SEQ = 999


@dataclass(frozen=True, order=True)
class LogPath:
    """A log file in the repository, ordered by (date, seq)."""

    date: date
    seq: int
    path: Path = field(compare=False)

    @property
    def name(self) -> str:
        return self.path.name

    @classmethod
    def from_path(cls, path: Path) -> LogPath | None:
        """Build a LogPath from a file name, or None if it isn't a log file."""
        match = LOG_NAME_RE.fullmatch(path.name)
        if not match:
            return None
        try:
            log_date = datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError:
            return None
        seq = int(match.group(2))
        if seq < 1:
            return None
        return cls(date=log_date, seq=seq, path=path)


def log_file_name(log_date: date, seq: int) -> str:
    return f"{log_date.isoformat()}-{seq:03d}{LOG_SUFFIX}"


def atomic_create(path: Path, content: str) -> None:
    """
    Write `content` to a new file at `path` via a temp file in the same directory.

    The temp file is published with a hard link, so an existing `path` raises
    FileExistsError instead of being replaced.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.link(tmp_name, path)
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)


class LogRepository:
    """Maps a root directory to its dated log files."""

    def __init__(self, root: Path):
        self._root = Path(root)

    @property
    def path(self) -> Path:
        return self._root

    def initialized(self) -> bool:
        """True if the repository directory exists. Checked on every call."""
        return self._root.is_dir()

    def logs(self) -> list[LogPath]:
        """All log files, oldest first."""
        if not self._root.is_dir():
            return []

        found = []
        for entry in self._root.iterdir():
            if not entry.is_file():
                continue
            logpath = LogPath.from_path(entry)
            if logpath is not None:
                found.append(logpath)
        return sorted(found)

    def latest(self) -> LogPath | None:
        logs = self.logs()
        return logs[-1] if logs else None

    def tail(self, limit: int) -> list[LogPath]:
        """Up to `limit` most recent log files, most recent first."""
        if limit < 1:
            raise InvalidArgumentError("limit must be >= 1")
        return list(reversed(self.logs()))[:limit]

    def init(self) -> LogPath:
        """
        Create the repository and today's log file.

        If a log file for today already exists it is returned as-is, so
        calling init() more than once a day never creates or erases anything.
        """
        self._root.mkdir(parents=True, exist_ok=True)

        today = date.today()
        todays = [lp for lp in self.logs() if lp.date == today]
        if todays:
            logger.debug("Log file for %s already exists: %s", today, todays[-1].path)
            return todays[-1]

        return self.create()

    def next_path(self) -> Path:
        """
        Path for the next log file, strictly after the latest one.

        Uses today's date unless the latest log is dated today or later
        (a second file in one day, or the clock was set back), in which case
        the latest log's date is kept and its sequence number incremented.
        """
        today = date.today()
        latest = self.latest()

        if latest is None or latest.date < today:
            return self._root / log_file_name(today, 1)

        if latest.seq >= MAX_SEQ:
            raise LogFileLimitExceeded(
                f"Cannot create more than {MAX_SEQ} log files for {latest.date.isoformat()}"
            )
        return self._root / log_file_name(latest.date, latest.seq + 1)

    def create(self, content: str = "") -> LogPath:
        """Atomically create the next log file with `content`."""
        path = self.next_path()
        atomic_create(path, content)
        logger.info("Created log file %s", path)
        return LogPath.from_path(path)
