"""
Log Monitor Views Package

Package Structure:
- view: Main screen orchestration (LogMonitorView)
- log_view: Filtered entry window (LogPanel)
- stats_view: Statistics panel (StatsPanel)
- help_view: Keyboard reference (HelpPanel)
- components: Filter line and status bar (FilterBar, StatusBar)
"""

from .view import LogMonitorView
from .log_view import LogPanel, format_row
from .stats_view import StatsPanel
from .help_view import HelpPanel
from .components import FilterBar, StatusBar, format_status

__all__ = [
    # Main view
    'LogMonitorView',

    # UI components
    'LogPanel',
    'StatsPanel',
    'HelpPanel',
    'FilterBar',
    'StatusBar',

    # Formatting helpers
    'format_row',
    'format_status',
]
