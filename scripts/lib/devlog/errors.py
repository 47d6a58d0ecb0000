"""Exceptions raised by devlog operations.

I/O failures are not wrapped: they surface as the ``OSError`` raised by the
filesystem call that failed.
"""


class DevlogError(Exception):
    """Base exception for devlog operations."""
    pass


class InvalidArgumentError(DevlogError, ValueError):
    """Raised when a numeric or named argument is out of range."""
    pass


class LogFileLimitExceeded(DevlogError):
    """Raised when no more log files can be created for a date."""
    pass


class LogNotFoundError(DevlogError):
    """Raised when an operation needs a log file and none exists."""
    pass


class NoSuchLogError(LogNotFoundError):
    """Raised when a status query looks further back than the repository goes."""
    pass
