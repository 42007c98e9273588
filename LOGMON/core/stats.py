"""
Statistics Module - Level and hourly aggregates over the entry buffer

Statistics always cover the whole buffer, independent of the active filter,
and are rebuilt from scratch on every ingestion batch.
"""
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .entry_store import EntryStore
from .log_parser import LogLevel

# "YYYY-MM-DD HH" -> hour digits at [11:13]
HOUR_SLICE = slice(11, 13)
MIN_HOUR_TIMESTAMP = 13


class LogStats(BaseModel):
    """Snapshot of buffer statistics"""
    total: int = 0
    error_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    debug_count: int = 0
    unknown_count: int = 0
    entries_by_hour: Dict[str, int] = Field(default_factory=dict)

    def count(self, level: LogLevel) -> int:
        return {
            LogLevel.ERROR: self.error_count,
            LogLevel.WARNING: self.warning_count,
            LogLevel.INFO: self.info_count,
            LogLevel.DEBUG: self.debug_count,
            LogLevel.UNKNOWN: self.unknown_count,
        }[level]

    def percentage(self, level: LogLevel) -> Optional[float]:
        """
        Share of ``level`` scaled to 0-100 (count / total * 100)

        Returns None when the buffer is empty.
        """
        if self.total <= 0:
            return None
        return self.count(level) / self.total * 100.0

    def hours(self) -> List[Tuple[str, int]]:
        """Hour buckets sorted by hour label"""
        return sorted(self.entries_by_hour.items())


class StatsAggregator:
    """Computes LogStats from an EntryStore"""

    def __init__(self):
        self.stats = LogStats()

    def recompute(self, store: EntryStore) -> LogStats:
        """
        Tally every buffered entry by level and by hour

        Entries without a usable timestamp are counted by level only.

        Args:
            store: Current entry store

        Returns:
            Fresh LogStats snapshot (also kept as ``self.stats``)
        """
        counts = {level: 0 for level in LogLevel}
        by_hour: Dict[str, int] = {}

        for entry in store:
            counts[entry.level] += 1
            if len(entry.timestamp) >= MIN_HOUR_TIMESTAMP:
                hour = entry.timestamp[HOUR_SLICE]
                by_hour[hour] = by_hour.get(hour, 0) + 1

        self.stats = LogStats(
            total=len(store),
            error_count=counts[LogLevel.ERROR],
            warning_count=counts[LogLevel.WARNING],
            info_count=counts[LogLevel.INFO],
            debug_count=counts[LogLevel.DEBUG],
            unknown_count=counts[LogLevel.UNKNOWN],
            entries_by_hour=by_hour,
        )
        return self.stats
