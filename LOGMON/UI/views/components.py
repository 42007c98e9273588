"""
Log Monitor Components Module - Filter line, status bar and key hints
"""
from textual.widgets import Static
from rich.text import Text

from LOGMON.core.view_state import ViewMode

KEY_HINTS = {
    ViewMode.FILTER: "Enter: Apply Filter | Esc: Cancel",
    ViewMode.LOG: "↑/↓: Scroll | PgUp/PgDn: Page | F: Follow | /: Filter | T: Timestamps | N: Line# | Tab: Switch View",
    ViewMode.STATS: "Tab: Switch View | R: Refresh Stats",
    ViewMode.HELP: "Tab: Switch View | Q: Quit",
}


class FilterBar(Static):
    """Current filter, or the filter prompt while editing"""

    DEFAULT_CSS = """
    FilterBar {
        height: 1;
        padding: 0 1;
    }
    """

    def show_filter(self, filter_text: str, editing: bool, draft: str) -> None:
        if editing:
            self.update(Text.assemble(
                ("Filter: ", "bold"),
                (draft, "bold white"),
                ("█", "blink"),
                ("  (Press Enter to apply, Esc to cancel)", "dim"),
            ))
        elif filter_text:
            self.update(Text(f"Filter: {filter_text}", style="yellow"))
        else:
            self.update(Text("Filter: No filter applied", style="bright_black"))


def format_status(
    follow_mode: bool,
    visible: int,
    total: int,
    filter_text: str,
    error: str = "",
) -> str:
    """Status line text: follow flag, line counts, filter and last read error"""
    status = f"Follow: {'ON' if follow_mode else 'OFF'} | Lines: {visible}/{total}"
    if filter_text:
        status += f" | Filter: {filter_text}"
    if error:
        status += f" | {error}"
    return status


class StatusBar(Static):
    """Bottom line: status on the left, key hints on the right"""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    def show_status(self, status: str, mode: ViewMode, has_error: bool = False) -> None:
        line = Text(status, style="red" if has_error else "white")
        hint = KEY_HINTS.get(mode, "")
        width = self.content_region.width
        gap = width - len(status) - len(hint)
        if hint and gap >= 2:
            line.append(" " * gap)
            line.append(hint, style="bright_black")
        self.update(line)
