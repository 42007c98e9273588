"""
Error types raised by the log monitor core
"""
from pathlib import Path


class LogMonitorError(Exception):
    pass


class LogReadError(LogMonitorError):
    """
    The backing log file could not be opened or read.

    Recoverable: the controller records it and retries on the next poll.
    """

    def __init__(self, path: Path, cause: OSError):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Cannot read log file '{self.path}': {cause.strerror or cause}")
