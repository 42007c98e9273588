"""
Help View Module - Keyboard reference
"""
from textual.widgets import Static

HELP_TEXT = """[bold]Log Monitor - Keyboard Shortcuts[/bold]

[bold cyan]General[/bold cyan]
Tab: Switch between views (Logs, Statistics, Help)
Q: Quit the application

[bold cyan]Log View[/bold cyan]
↑/↓: Scroll up/down
PgUp/PgDn: Page up/down
F: Toggle follow mode (auto-scroll to new logs)
T: Toggle timestamps display
N: Toggle line numbers
/: Enter filter mode
C: Clear current filter

[bold cyan]Filter Mode[/bold cyan]
Enter: Apply filter
Esc: Cancel and exit filter mode

[bold cyan]Statistics View[/bold cyan]
R: Refresh statistics
"""


class HelpPanel(Static):
    DEFAULT_CSS = """
    HelpPanel {
        border: round $primary;
        height: 1fr;
    }
    """

    def on_mount(self) -> None:
        self.border_title = "Help"
        self.update(HELP_TEXT)
