"""Modal screen showing keyboard shortcuts."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label


class HelpScreen(ModalScreen):
    """Modal screen showing keyboard shortcuts."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close"),
        Binding("q", "dismiss", "Close"),
        Binding("?", "dismiss", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-dialog {
        width: 60;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #help-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
        width: 100%;
    }

    .help-section {
        height: auto;
        margin-top: 1;
    }

    .help-section-title {
        text-style: bold;
        color: $primary;
    }

    .help-binding {
        margin-left: 2;
    }
    """

    def compose(self) -> ComposeResult:
        """Create help dialog content."""
        with Vertical(id="help-dialog"):
            yield Label("kubehub dash - Keyboard Shortcuts", id="help-title")

            with Vertical(classes="help-section"):
                yield Label("Catalog", classes="help-section-title")
                yield Label("Tab/j   Next distribution", classes="help-binding")
                yield Label("S-Tab/k Previous distribution", classes="help-binding")
                yield Label("Enter   View installation", classes="help-binding")

            with Vertical(classes="help-section"):
                yield Label("Installation guide", classes="help-section-title")
                yield Label("c       Copy script", classes="help-binding")
                yield Label("←/→     Previous/next distribution", classes="help-binding")
                yield Label("Esc/q   Close guide", classes="help-binding")

            with Vertical(classes="help-section"):
                yield Label("General", classes="help-section-title")
                yield Label("?       Show this help", classes="help-binding")
                yield Label("q       Quit", classes="help-binding")

            yield Label("")
            yield Label("Press Esc to close", id="help-footer")
