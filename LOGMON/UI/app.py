"""
Log Monitor Main Application - Terminal log viewer using Textual
"""
from typing import Optional

from textual.app import App
from textual.binding import Binding

from LOGMON.core.commands import Command
from LOGMON.core.controller import LogMonitor
from LOGMON.core.view_state import ViewMode
from LOGMON.UI.keymap import NORMAL_KEYS, PRIORITY_KEYS
from LOGMON.UI.views import LogMonitorView


class LogMonitorApp(App):
    """Tail a log file with filtering, statistics and follow mode"""

    TITLE = "Log Monitor"
    CSS_PATH = "logmon.tcss"

    BINDINGS = [Binding("q", "quit", "Quit")] + [
        Binding(
            key,
            f"command('{command_type.value}')",
            description,
            show=show,
            priority=key in PRIORITY_KEYS,
        )
        for key, command_type, description, show in NORMAL_KEYS
    ]

    def __init__(self, monitor: LogMonitor, **kwargs):
        super().__init__(**kwargs)
        self.monitor = monitor
        self.view_screen: Optional[LogMonitorView] = None

    def on_mount(self) -> None:
        """Show the monitor screen and start polling the file"""
        self.sub_title = str(self.monitor.settings.log_path)
        self.view_screen = LogMonitorView(self.monitor)
        self.push_screen(self.view_screen)
        self.set_interval(self.monitor.settings.poll_interval, self.poll_log)

    def check_action(self, action: str, parameters: tuple) -> Optional[bool]:
        """Disable key bindings while the filter prompt owns the keyboard"""
        if action in ("command", "quit") and self.monitor.view.active_view is ViewMode.FILTER:
            return False
        return True

    def action_command(self, name: str) -> None:
        self.apply_command(Command.from_name(name))

    def apply_command(self, command: Command) -> None:
        """Apply a command to the controller and re-render"""
        if not self.monitor.apply(command):
            self.exit()
            return
        self.refresh_view()

    def poll_log(self) -> None:
        """Timer callback: ingest new lines and re-render on change"""
        # The interval timer already paces polls
        had_error = self.monitor.last_error is not None
        ingested = self.monitor.poll(force=True)
        error = self.monitor.last_error

        if error is not None and not had_error:
            self.notify(str(error), title="Log read failed", severity="error")

        if ingested or had_error != (error is not None):
            self.refresh_view()

    def refresh_view(self) -> None:
        if self.view_screen is not None and self.view_screen.is_attached:
            self.view_screen.refresh_view()


def run_app(monitor: LogMonitor) -> None:
    """Entry point to run the log monitor application"""
    app = LogMonitorApp(monitor)
    app.run()
