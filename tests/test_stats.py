"""
Unit tests for statistics aggregation
"""
import random

from LOGMON.core.entry_store import EntryStore
from LOGMON.core.log_parser import LogParser, LogLevel
from LOGMON.core.stats import LogStats, StatsAggregator


def store_of(*contents, capacity=1000):
    store = EntryStore(max_entries=capacity)
    store.extend(LogParser().parse_lines(list(contents)))
    return store


class TestStatsAggregator:

    def test_two_hour_scenario(self):
        store = store_of("2024-01-01 10:00:00 ERROR boom", "2024-01-01 11:00:00 INFO ok")
        stats = StatsAggregator().recompute(store)
        assert stats.total == 2
        assert stats.error_count == 1
        assert stats.info_count == 1
        assert stats.entries_by_hour == {"10": 1, "11": 1}

    def test_untimestamped_entries_count_by_level_only(self):
        store = store_of("2024-01-01 10:00:00 ERROR boom", "warn without time", "2024-01-01 10:30:00 x")
        stats = StatsAggregator().recompute(store)
        assert stats.warning_count == 1
        assert stats.unknown_count == 1
        assert stats.entries_by_hour == {"10": 2}

    def test_counts_sum_to_total(self):
        rng = random.Random(11)
        words = ["error", "warn", "debug", "info", "notice", "plain", "fail"]
        for _ in range(10):
            store = store_of(
                *(f"2024-01-01 {rng.randint(0, 23):02d}:00:00 {rng.choice(words)}" for _ in range(80)),
                capacity=50,
            )
            stats = StatsAggregator().recompute(store)
            level_sum = sum(stats.count(level) for level in LogLevel)
            assert level_sum == stats.total == len(store)
            assert sum(stats.entries_by_hour.values()) == len(store)

    def test_recompute_after_eviction(self):
        """Evicted entries leave the hour buckets"""
        store = store_of("2024-01-01 09:00:00 INFO a", "2024-01-01 10:00:00 INFO b", capacity=2)
        aggregator = StatsAggregator()
        aggregator.recompute(store)
        store.extend(LogParser().parse_lines(["2024-01-01 11:00:00 INFO c"]))
        stats = aggregator.recompute(store)
        assert stats.entries_by_hour == {"10": 1, "11": 1}
        assert aggregator.stats is stats

    def test_empty_store(self):
        stats = StatsAggregator().recompute(store_of())
        assert stats.total == 0
        assert stats.entries_by_hour == {}


class TestLogStats:

    def test_percentage(self):
        stats = LogStats(total=4, error_count=1, info_count=3)
        assert stats.percentage(LogLevel.ERROR) == 25.0
        assert stats.percentage(LogLevel.INFO) == 75.0
        assert stats.percentage(LogLevel.DEBUG) == 0.0

    def test_percentage_without_entries(self):
        assert LogStats().percentage(LogLevel.ERROR) is None

    def test_hours_sorted(self):
        stats = LogStats(total=3, entries_by_hour={"14": 1, "02": 1, "09": 1})
        assert stats.hours() == [("02", 1), ("09", 1), ("14", 1)]
