"""
Log View Module - Renders the visible window of filtered log entries

Handles:
- Color-coded log levels
- Optional line numbers and timestamps
- Viewport height reporting back to the controller
"""
from typing import List

from textual.widgets import Static
from rich.text import Text

from LOGMON.core.controller import VisibleEntry


def format_row(row: VisibleEntry) -> Text:
    """
    Format one visible entry as a styled line

    Args:
        row: VisibleEntry to format

    Returns:
        rich Text with number, timestamp, level tag and content
    """
    entry = row.entry
    color = entry.level.color
    line = Text(no_wrap=True, overflow="ellipsis")

    if row.show_line_number:
        line.append(f"{row.number:<4} ", style="bright_black")

    if row.show_timestamp:
        line.append(f"{entry.timestamp} ", style="bright_black")

    line.append(f"[{entry.level.value}] ", style=f"bold {color}")
    line.append(entry.content, style=color)
    return line


class LogPanel(Static):
    """Scrolled window over the filtered entries"""

    DEFAULT_CSS = """
    LogPanel {
        border: round $primary;
        height: 1fr;
    }
    """

    @property
    def viewport_height(self) -> int:
        """Rows available for entries"""
        return max(1, self.content_region.height)

    def show_rows(self, rows: List[VisibleEntry], visible: int, total: int) -> None:
        """
        Replace the panel contents

        Args:
            rows: Entries for the current window, top to bottom
            visible: Filtered entry count
            total: Buffered entry count
        """
        self.border_title = f"Logs ({visible}/{total})"
        if not rows:
            self.update(Text("No log entries", style="dim"))
            return
        separator = Text("\n", no_wrap=True, overflow="ellipsis")
        self.update(separator.join(format_row(row) for row in rows))
