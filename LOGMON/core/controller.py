"""
Log Monitor Controller - Single owner of all viewer state

Handles:
- Initial load and periodic ingestion from the tail reader
- Keeping the filter index and statistics consistent with the buffer
- Follow-mode autoscroll after every ingestion batch
- Applying user commands atomically
- Read-only snapshots for the rendering layer

Ordering within one poll: reader -> store (with eviction) -> filter index
and statistics -> scroll sync.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .commands import Command, CommandType, FILTER_EDIT_COMMANDS
from .config import MonitorSettings
from .entry_store import EntryStore
from .errors import LogReadError
from .filter_index import FilterIndex
from .log_parser import LogEntry, LogParser
from .log_reader import LogFileReader
from .stats import LogStats, StatsAggregator
from .view_state import ViewMode, ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibleEntry:
    """One row handed to the renderer"""
    number: int
    entry: LogEntry
    show_timestamp: bool
    show_line_number: bool


class LogMonitor:
    """
    Controller tying the tail reader, buffer, filter, stats and view together

    Created once at startup and passed to the UI; the UI only reads the
    query properties and calls ``apply``/``poll``.
    """

    def __init__(
        self,
        settings: MonitorSettings,
        reader: Optional[LogFileReader] = None,
        parser: Optional[LogParser] = None,
    ):
        self.settings = settings
        self.parser = parser or LogParser()
        self.reader = reader or LogFileReader(
            settings.log_path, min_interval=settings.poll_interval
        )

        self.store = EntryStore(settings.max_entries, parser=self.parser)
        self.filter_index = FilterIndex()
        self.aggregator = StatsAggregator()
        self.view = ViewState(page_size=settings.page_size)

        self.last_error: Optional[LogReadError] = None

    # Queries

    @property
    def entries(self) -> EntryStore:
        return self.store

    @property
    def stats(self) -> LogStats:
        return self.aggregator.stats

    @property
    def filter_text(self) -> str:
        return self.filter_index.filter_text

    @property
    def visible_count(self) -> int:
        return len(self.filter_index)

    @property
    def total_count(self) -> int:
        return len(self.store)

    def visible_entries(self, height: int) -> List[VisibleEntry]:
        """
        Entries in the current viewport, post-filter

        Args:
            height: Viewport height in rows

        Returns:
            List of VisibleEntry rows, top to bottom
        """
        positions = self.filter_index.positions
        rows = []
        for i in self.view.window(len(positions), height):
            entry = self.store.at(positions[i])
            rows.append(VisibleEntry(
                number=i + 1,
                entry=entry,
                show_timestamp=self.view.show_timestamps and bool(entry.timestamp),
                show_line_number=self.view.show_line_numbers,
            ))
        return rows

    # Ingestion

    def _recompute(self) -> None:
        self.filter_index.recompute(self.store)
        self.aggregator.recompute(self.store)
        self.view.sync_scroll(len(self.filter_index))

    def load(self) -> int:
        """
        Read the tail of the file and establish the starting state

        Returns:
            Number of entries loaded

        Raises:
            LogReadError: If the file cannot be read; the caller decides
                whether that is fatal at startup
        """
        lines = self.reader.read_last_n_lines(self.settings.initial_lines)
        self.store.initialize(lines, len(lines))
        self._recompute()
        logger.info("Loaded %d entries from %s", len(self.store), self.settings.log_path)
        return len(self.store)

    def poll(self, force: bool = False) -> int:
        """
        Run one ingestion iteration

        Read failures are recorded in ``last_error`` and retried on the next
        call; state is left untouched.

        Returns:
            Number of new lines ingested
        """
        try:
            lines = self.reader.poll(force=force)
        except LogReadError as e:
            if self.last_error is None:
                logger.warning("%s", e)
            else:
                logger.debug("Still failing: %s", e)
            self.last_error = e
            return 0

        if self.last_error is not None:
            logger.info("Reading %s again", self.settings.log_path)
            self.last_error = None

        if not lines:
            return 0

        evicted_before = self.store.evicted
        self.store.extend(self.parser.parse_lines(lines))
        self._recompute()

        logger.debug(
            "Ingested %d lines (%d evicted, %d buffered)",
            len(lines), self.store.evicted - evicted_before, len(self.store)
        )
        return len(lines)

    # Filtering

    def set_filter(self, text: str) -> None:
        """Commit ``text`` as the active filter and recompute"""
        self.filter_index.set_filter_text(text, self.store)
        self.view.sync_scroll(len(self.filter_index))

    def refresh_stats(self) -> LogStats:
        return self.aggregator.recompute(self.store)

    # Commands

    def apply(self, command: Command) -> bool:
        """
        Apply one user command

        While the filter prompt is open only filter editing commands and
        Quit take effect.

        Returns:
            False when the command asks the application to quit
        """
        kind = command.type
        view = self.view
        length = len(self.filter_index)

        if kind is CommandType.QUIT:
            return False

        if view.active_view is ViewMode.FILTER and kind not in FILTER_EDIT_COMMANDS:
            return True
        if view.active_view is not ViewMode.FILTER and kind in FILTER_EDIT_COMMANDS:
            return True

        if kind is CommandType.SCROLL_UP:
            view.scroll_up(length)
        elif kind is CommandType.SCROLL_DOWN:
            view.scroll_down(length)
        elif kind is CommandType.PAGE_UP:
            view.page_up(length)
        elif kind is CommandType.PAGE_DOWN:
            view.page_down(length)
        elif kind is CommandType.TOGGLE_FOLLOW:
            view.toggle_follow(length)
        elif kind is CommandType.TOGGLE_TIMESTAMPS:
            view.toggle_timestamps()
        elif kind is CommandType.TOGGLE_LINE_NUMBERS:
            view.toggle_line_numbers()
        elif kind is CommandType.NEXT_TAB:
            view.next_tab()
        elif kind is CommandType.PREV_TAB:
            view.prev_tab()
        elif kind is CommandType.CLEAR_FILTER:
            self.set_filter("")
        elif kind is CommandType.REFRESH_STATS:
            self.refresh_stats()
        elif kind is CommandType.ENTER_FILTER_EDIT:
            view.enter_filter_edit(self.filter_text)
        elif kind is CommandType.FILTER_CHAR:
            view.append_filter_char(command.char)
            if self.settings.live_filter:
                self.set_filter(view.filter_draft)
        elif kind is CommandType.FILTER_BACKSPACE:
            view.backspace_filter()
            if self.settings.live_filter:
                self.set_filter(view.filter_draft)
        elif kind is CommandType.CONFIRM_FILTER:
            self.set_filter(view.filter_draft)
            view.finish_filter_edit()
        elif kind is CommandType.CANCEL_FILTER:
            if self.filter_text != view.saved_filter:
                self.set_filter(view.saved_filter)
            view.cancel_filter_edit(len(self.filter_index))

        return True
