"""
View State Module - Scroll position, follow mode and view switching

``scroll`` indexes the filter index (not the raw buffer) and always lies
in [0, length] where length is the current filtered entry count.
"""
from enum import Enum


class ViewMode(Enum):
    LOG = "log"
    STATS = "stats"
    HELP = "help"
    FILTER = "filter"


# Tab cycle; FILTER is entered explicitly and is never part of it
TAB_VIEWS = [ViewMode.LOG, ViewMode.STATS, ViewMode.HELP]


class ViewState:
    """Mutable view state owned by the controller"""

    def __init__(self, page_size: int = 10):
        self.page_size = page_size
        self.scroll = 0
        self.follow_mode = True
        self.active_view = ViewMode.LOG
        self.selected_tab = 0
        self.show_timestamps = True
        self.show_line_numbers = True

        # Filter prompt
        self.editing = False
        self.filter_draft = ""
        self.saved_filter = ""
        self.saved_scroll = 0

    # Scrolling

    @staticmethod
    def _clamp(value: int, length: int) -> int:
        return max(0, min(value, length))

    def scroll_up(self, length: int) -> None:
        self.follow_mode = False
        self.scroll = self._clamp(self.scroll - 1, length)

    def scroll_down(self, length: int) -> None:
        self.scroll = self._clamp(self.scroll + 1, length)

    def page_up(self, length: int) -> None:
        self.follow_mode = False
        self.scroll = self._clamp(self.scroll - self.page_size, length)

    def page_down(self, length: int) -> None:
        self.scroll = self._clamp(self.scroll + self.page_size, length)

    def toggle_follow(self, length: int) -> None:
        self.follow_mode = not self.follow_mode
        if self.follow_mode:
            # Jump to the bottom when enabling follow mode
            self.scroll = length

    def sync_scroll(self, length: int) -> None:
        """Re-anchor scroll after the filtered length changed"""
        if self.follow_mode:
            self.scroll = length
        else:
            self.scroll = self._clamp(self.scroll, length)

    def window(self, length: int, height: int) -> range:
        """
        Filtered positions visible in a viewport of ``height`` rows

        ``scroll`` is the exclusive bottom edge; the window grows upwards
        and is topped up to a full page when enough rows exist.
        """
        if height <= 0 or length <= 0:
            return range(0)
        end = max(min(self.scroll, length), min(height, length))
        start = max(0, end - height)
        return range(start, end)

    # Display toggles

    def toggle_timestamps(self) -> None:
        self.show_timestamps = not self.show_timestamps

    def toggle_line_numbers(self) -> None:
        self.show_line_numbers = not self.show_line_numbers

    # Views

    def _select_tab(self, index: int) -> None:
        self.selected_tab = index % len(TAB_VIEWS)
        self.active_view = TAB_VIEWS[self.selected_tab]

    def next_tab(self) -> None:
        self._select_tab(self.selected_tab + 1)

    def prev_tab(self) -> None:
        self._select_tab(self.selected_tab - 1)

    # Filter prompt

    def enter_filter_edit(self, current_filter: str) -> None:
        self.active_view = ViewMode.FILTER
        self.editing = True
        self.saved_filter = current_filter
        self.saved_scroll = self.scroll
        self.filter_draft = current_filter

    def append_filter_char(self, char: str) -> None:
        self.filter_draft += char

    def backspace_filter(self) -> None:
        self.filter_draft = self.filter_draft[:-1]

    def finish_filter_edit(self) -> None:
        self.editing = False
        self._select_tab(0)

    def cancel_filter_edit(self, length: int) -> None:
        """Leave the prompt and put scroll back where editing started"""
        self.scroll = self.saved_scroll
        self.sync_scroll(length)
        self.finish_filter_edit()
