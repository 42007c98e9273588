"""
Log File Reader Module - Incremental tailing of a single growing log file

Handles:
- Initial read of the whole file
- Byte-offset tailing that reads only the appended span
- Partial trailing lines held back until their newline arrives
- Truncation (file shrank): offset reset and re-read from the start
- Lines that are not valid UTF-8 are skipped
- Poll throttling to bound I/O per iteration
"""
import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .errors import LogReadError

logger = logging.getLogger(__name__)


class LogFileReader:
    """
    Tail reader for one newline-delimited UTF-8 text file

    Features:
    - ``read_all`` establishes the starting position
    - ``poll`` returns only complete lines appended since the last read
    - Calls closer together than ``min_interval`` are no-ops
    - Failed reads raise LogReadError and leave the reader state untouched

    Example:
        >>> reader = LogFileReader(Path("app.log"))
        >>> lines = reader.read_all()
        >>> new_lines = reader.poll()
    """

    def __init__(
        self,
        file_path: Path,
        min_interval: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize log file reader

        Args:
            file_path: Path to the log file
            min_interval: Minimum seconds between two polls that touch the file
            clock: Monotonic time source (injectable for tests)
        """
        self.file_path = Path(file_path)
        self.min_interval = min_interval
        self.clock = clock

        # Tailing state
        self.tail_position = 0
        self.partial = b""
        self.last_poll: Optional[float] = None

    @staticmethod
    def _split(data: bytes) -> Tuple[List[bytes], bytes]:
        """Split into complete raw lines plus the unterminated remainder"""
        parts = data.split(b"\n")
        return parts[:-1], parts[-1]

    def _decode_lines(self, raw_lines: List[bytes]) -> List[str]:
        lines = []
        for raw in raw_lines:
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Skipping undecodable line in %s", self.file_path)
                continue
            lines.append(line.rstrip("\r"))
        return lines

    def read_all(self) -> List[str]:
        """
        Read every complete line currently in the file

        Positions the tail at the end of the data read, so the next poll
        only returns lines appended afterwards.

        Returns:
            Decoded lines, oldest first

        Raises:
            LogReadError: If the file cannot be opened or read
        """
        try:
            with open(self.file_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise LogReadError(self.file_path, e) from e

        complete, partial = self._split(data)
        self.tail_position = len(data)
        self.partial = partial
        self.last_poll = self.clock()

        return self._decode_lines(complete)

    def read_last_n_lines(self, n: int = 100) -> List[str]:
        """
        Read last N lines (for the initial view)

        Args:
            n: Number of lines to keep from the end

        Returns:
            Up to N decoded lines, oldest first
        """
        lines = self.read_all()
        if n <= 0:
            return []
        return lines[-n:]

    def poll(self, force: bool = False) -> List[str]:
        """
        Read new lines added since the last read

        Args:
            force: Ignore the minimum interval throttle

        Returns:
            Complete new lines, oldest first; empty if nothing changed or
            if the call was throttled

        Raises:
            LogReadError: If the file is missing or unreadable
        """
        now = self.clock()
        if (
            not force
            and self.last_poll is not None
            and now - self.last_poll < self.min_interval
        ):
            return []
        self.last_poll = now

        offset = self.tail_position
        partial = self.partial

        try:
            size = self.file_path.stat().st_size

            if size < offset:
                logger.warning(
                    "%s shrank from %d to %d bytes, re-reading from the start",
                    self.file_path, offset, size
                )
                offset = 0
                partial = b""

            data = b""
            if size > offset:
                with open(self.file_path, "rb") as f:
                    f.seek(offset)
                    data = f.read()
        except OSError as e:
            raise LogReadError(self.file_path, e) from e

        complete, partial = self._split(partial + data)

        # Commit only after the read succeeded
        self.tail_position = offset + len(data)
        self.partial = partial

        return self._decode_lines(complete)
