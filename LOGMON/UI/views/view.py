"""
Log Monitor View Module - Main screen composition and rendering

Handles:
- Layout of the log, statistics and help tabs
- Rendering controller snapshots into the panels
- Decoding keys while the filter prompt is open
"""
from textual import on, events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Footer, Header, TabbedContent, TabPane

from LOGMON.core.commands import Command, CommandType
from LOGMON.core.controller import LogMonitor
from LOGMON.core.view_state import TAB_VIEWS, ViewMode
from LOGMON.UI.keymap import filter_command_for_key
from .components import FilterBar, StatusBar, format_status
from .help_view import HelpPanel
from .log_view import LogPanel
from .stats_view import StatsPanel

TAB_IDS = {
    ViewMode.LOG: "log-tab",
    ViewMode.STATS: "stats-tab",
    ViewMode.HELP: "help-tab",
    ViewMode.FILTER: "log-tab",
}


class LogMonitorView(Screen):
    """
    Single screen of the log monitor

    All state lives in the LogMonitor controller; this screen only renders
    snapshots of it and forwards commands through the app.
    """

    AUTO_FOCUS = None

    def __init__(self, monitor: LogMonitor, **kwargs):
        super().__init__(**kwargs)
        self.monitor = monitor

    def compose(self) -> ComposeResult:
        """Compose the monitor layout"""
        yield Header(show_clock=True)
        yield FilterBar(id="filter-bar")

        with TabbedContent(initial="log-tab", id="views"):
            with TabPane("Logs", id="log-tab"):
                yield LogPanel(id="log-panel")
            with TabPane("Statistics", id="stats-tab"):
                yield StatsPanel(id="stats-panel")
            with TabPane("Help", id="help-tab"):
                yield HelpPanel(id="help-panel")

        yield StatusBar(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.call_after_refresh(self.refresh_view)

    def on_resize(self, event: events.Resize) -> None:
        self.call_after_refresh(self.refresh_view)

    def on_key(self, event: events.Key) -> None:
        """Route keys to the filter prompt while it is open"""
        if self.monitor.view.active_view is not ViewMode.FILTER:
            return

        command = filter_command_for_key(event.key, event.character)
        if command is None:
            return

        # Keep the key away from app bindings
        event.stop()
        event.prevent_default()
        self.app.apply_command(command)

    @on(TabbedContent.TabActivated)
    def handle_tab_activated(self, event: TabbedContent.TabActivated) -> None:
        """Keep the controller in step with tabs picked by mouse"""
        view = self.monitor.view
        if view.active_view is ViewMode.FILTER:
            return

        target = [TAB_IDS[mode] for mode in TAB_VIEWS].index(event.pane.id)
        steps = (target - view.selected_tab) % len(TAB_VIEWS)
        if not steps:
            return
        for _ in range(steps):
            self.monitor.apply(Command.of(CommandType.NEXT_TAB))
        self.refresh_view()

    def refresh_view(self) -> None:
        """Render the current controller state into every panel"""
        monitor = self.monitor
        view = monitor.view

        tabs = self.query_one("#views", TabbedContent)
        tab_id = TAB_IDS[view.active_view]
        if tabs.active != tab_id:
            tabs.active = tab_id

        self.query_one("#filter-bar", FilterBar).show_filter(
            monitor.filter_text, view.editing, view.filter_draft
        )

        log_panel = self.query_one("#log-panel", LogPanel)
        log_panel.show_rows(
            monitor.visible_entries(log_panel.viewport_height),
            monitor.visible_count,
            monitor.total_count,
        )

        if view.active_view is ViewMode.STATS:
            self.query_one("#stats-panel", StatsPanel).show_stats(monitor.stats)

        error = str(monitor.last_error) if monitor.last_error else ""
        status = format_status(
            view.follow_mode,
            monitor.visible_count,
            monitor.total_count,
            monitor.filter_text,
            error,
        )
        self.query_one("#status-bar", StatusBar).show_status(
            status, view.active_view, has_error=bool(error)
        )
