"""
Unit tests for the filter index
"""
import random

import pytest

from LOGMON.core.entry_store import EntryStore
from LOGMON.core.filter_index import FilterIndex
from LOGMON.core.log_parser import LogParser


def store_of(*contents, capacity=1000):
    store = EntryStore(max_entries=capacity)
    store.extend(LogParser().parse_lines(list(contents)))
    return store


class TestFilterIndex:

    def test_fail_scenario(self):
        store = store_of("connection fail", "all good", "failover started")
        index = FilterIndex()
        assert index.set_filter_text("fail", store) == [0, 2]
        assert [store.at(i).content for i in index] == ["connection fail", "failover started"]

    def test_empty_filter_is_identity(self):
        store = store_of("A", "B", "C", "D", capacity=3)
        index = FilterIndex()
        assert index.recompute(store) == [0, 1, 2]
        assert [store.at(i).content for i in index] == ["B", "C", "D"]

    def test_case_insensitive(self):
        store = store_of("Disk FULL", "disk full", "memory ok")
        index = FilterIndex("Full")
        assert index.recompute(store) == [0, 1]

    def test_matches_content_only(self):
        """Level names are not part of the match unless they appear in the text"""
        store = store_of("2024-01-01 10:00:00 boom failed")
        index = FilterIndex()
        assert index.set_filter_text("ERROR", store) == []
        assert index.set_filter_text("10:00", store) == [0]

    def test_no_regex(self):
        store = store_of("a.b", "axb")
        assert FilterIndex("a.b").recompute(store) == [0]

    def test_idempotent(self):
        store = store_of("x error", "y", "z error")
        index = FilterIndex("error")
        first = list(index.recompute(store))
        assert index.recompute(store) == first

    def test_sound_and_complete(self):
        """Every match contains the text and every containing entry matches"""
        rng = random.Random(3)
        words = ["alpha", "Beta", "GAMMA", "delta error", "warn epsilon", "beta-max"]
        store = store_of(*(" ".join(rng.sample(words, 2)) for _ in range(60)))
        for text in ["beta", "ERR", "a", "zzz", "", "-MAX"]:
            index = FilterIndex()
            positions = index.set_filter_text(text, store)
            expected = [i for i, e in enumerate(store) if text.lower() in e.content.lower()]
            assert positions == expected

    def test_reset_to_empty(self):
        store = store_of("a", "b")
        index = FilterIndex("a")
        index.recompute(store)
        assert index.set_filter_text("", store) == [0, 1]
        assert index.filter_text == ""

    def test_len_and_iter(self):
        store = store_of("a", "b", "ab")
        index = FilterIndex("b")
        index.recompute(store)
        assert len(index) == 2
        assert list(index) == [1, 2]

    @pytest.mark.parametrize("text, expected", [("", True), ("OK", True), ("nope", False)])
    def test_matches(self, text, expected):
        entry = LogParser().parse_line("all ok")
        assert FilterIndex(text).matches(entry) is expected
