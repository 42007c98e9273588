"""
Statistics View Module - Level distribution and hourly message counts
"""
from rich.console import Group
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from LOGMON.core.log_parser import LogLevel
from LOGMON.core.stats import LogStats

LEVEL_TITLES = [
    (LogLevel.ERROR, "Errors"),
    (LogLevel.WARNING, "Warnings"),
    (LogLevel.INFO, "Info"),
    (LogLevel.DEBUG, "Debug"),
    (LogLevel.UNKNOWN, "Unknown"),
]


def format_summary(stats: LogStats) -> str:
    return (
        f"Total Log Entries: {stats.total} | Errors: {stats.error_count} | "
        f"Warnings: {stats.warning_count} | Info: {stats.info_count} | "
        f"Debug: {stats.debug_count}"
    )


def format_hours(stats: LogStats) -> str:
    """One "Hour HH: N messages" item per bucket, sorted by hour"""
    return " | ".join(
        f"Hour {hour}: {count} messages" for hour, count in stats.hours()
    )


def build_level_table(stats: LogStats) -> Table:
    """Per-level counts with percentage bars (bars only when entries exist)"""
    table = Table(box=None, expand=True, show_header=False, padding=(0, 1))
    table.add_column("Level", width=10)
    table.add_column("Count", justify="right", width=7)
    table.add_column("Share", ratio=1)
    table.add_column("Pct", justify="right", width=7)

    for level, title in LEVEL_TITLES:
        pct = stats.percentage(level)
        if pct is None:
            table.add_row(Text(title, style=level.color), str(stats.count(level)), "", "-")
            continue
        table.add_row(
            Text(title, style=f"bold {level.color}"),
            str(stats.count(level)),
            ProgressBar(total=100.0, completed=pct, complete_style=level.color),
            f"{pct:.1f}%",
        )
    return table


class StatsPanel(Static):
    """Summary, level distribution and messages by hour"""

    DEFAULT_CSS = """
    StatsPanel {
        border: round $primary;
        height: 1fr;
    }
    """

    def show_stats(self, stats: LogStats) -> None:
        self.border_title = "Statistics"
        hours = format_hours(stats) or "No timestamped entries"
        self.update(Group(
            Text(format_summary(stats), style="bold"),
            Text(""),
            build_level_table(stats),
            Text(""),
            Text("Messages by Hour", style="bold cyan"),
            Text(hours),
        ))
