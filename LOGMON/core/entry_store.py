"""
Entry Store Module - Bounded in-memory buffer of classified log entries

Handles:
- Append with FIFO eviction once capacity is exceeded
- Initial population from the tail of a file
- Read-only positional access for the filter index and renderers
"""
import logging
from collections import deque
from typing import Deque, Iterable, Iterator, List, Optional

from .log_parser import LogParser, LogEntry

logger = logging.getLogger(__name__)


class EntryStore:
    """
    Ordered, capacity-bounded sequence of LogEntry objects

    The store always holds the most recent ``max_entries`` entries appended,
    oldest first. It is the single source of truth for log content.
    """

    def __init__(self, max_entries: int = 1000, parser: Optional[LogParser] = None):
        """
        Args:
            max_entries: Capacity of the buffer (must be at least 1)
            parser: Classifier used by initialize()
        """
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")

        self.max_entries = max_entries
        self.parser = parser or LogParser()
        self._entries: Deque[LogEntry] = deque()
        self.evicted = 0

    def append(self, entry: LogEntry) -> None:
        """Add an entry at the tail, evicting from the head while over capacity"""
        self._entries.append(entry)
        while len(self._entries) > self.max_entries:
            self._entries.popleft()
            self.evicted += 1

    def extend(self, entries: Iterable[LogEntry]) -> None:
        for entry in entries:
            self.append(entry)

    def initialize(self, lines: List[str], n: int) -> None:
        """
        Classify and append the last ``n`` raw lines, in order

        Args:
            lines: Raw lines from the initial read
            n: How many trailing lines to keep
        """
        if n <= 0:
            return
        evicted_before = self.evicted
        self.extend(self.parser.parse_lines(lines[-n:]))
        if self.evicted > evicted_before:
            logger.debug("Initial load evicted %d entries", self.evicted - evicted_before)

    def at(self, index: int) -> LogEntry:
        """Entry at ``index`` (0 is the oldest buffered entry)"""
        return self._entries[index]

    def __getitem__(self, index: int) -> LogEntry:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)
