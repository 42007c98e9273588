"""
Log Monitor Core Package - Ingestion, buffering, filtering and statistics

Package Structure:
- log_parser: Line classification (LogParser, LogEntry, LogLevel)
- log_reader: Incremental file tailing (LogFileReader)
- entry_store: Bounded entry buffer (EntryStore)
- filter_index: Filtered positions (FilterIndex)
- stats: Level/hour aggregates (StatsAggregator, LogStats)
- view_state: Scroll and view state machine (ViewState, ViewMode)
- commands: User intents (Command, CommandType)
- controller: State owner (LogMonitor, VisibleEntry)
- config: Settings model (MonitorSettings)
- errors: Exception types (LogMonitorError, LogReadError)
"""

from .log_parser import LogParser, LogEntry, LogLevel
from .log_reader import LogFileReader
from .entry_store import EntryStore
from .filter_index import FilterIndex
from .stats import StatsAggregator, LogStats
from .view_state import ViewState, ViewMode, TAB_VIEWS
from .commands import Command, CommandType
from .controller import LogMonitor, VisibleEntry
from .config import MonitorSettings
from .errors import LogMonitorError, LogReadError

__all__ = [
    # Controller
    'LogMonitor',
    'VisibleEntry',
    'MonitorSettings',

    # Core components
    'LogParser',
    'LogFileReader',
    'EntryStore',
    'FilterIndex',
    'StatsAggregator',
    'ViewState',

    # Data models
    'LogEntry',
    'LogLevel',
    'LogStats',
    'ViewMode',
    'TAB_VIEWS',
    'Command',
    'CommandType',

    # Errors
    'LogMonitorError',
    'LogReadError',
]
