"""Modal screen with the installation guide for one distribution."""

from collections.abc import Callable

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Rule, Static

from kubehub.catalog.data import INSTALLATION_STEPS
from kubehub.catalog.display import numbered_prerequisites
from kubehub.catalog.types import DistributionEntry


class InstallationScreen(ModalScreen[str]):
    """Detail view for a single distribution.

    Dismisses with the entry id. Copy and navigation requests are delegated
    to callbacks so the app stays the sole owner of selection state.
    """

    AUTO_FOCUS = "#copy-script"

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("q", "close", "Close"),
        Binding("c", "copy_script", "Copy Script"),
        Binding("left", "previous_entry", "Previous", priority=True),
        Binding("right", "next_entry", "Next", priority=True),
    ]

    DEFAULT_CSS = """
    InstallationScreen {
        align: center middle;
    }

    #installation-dialog {
        width: 90%;
        max-width: 110;
        height: auto;
        max-height: 85%;
        background: $surface;
        border: solid $primary;
        padding: 1 2;
    }

    #installation-title {
        text-style: bold;
        width: 100%;
        margin-bottom: 1;
    }

    .section-title {
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
    }

    .prerequisite {
        margin-left: 2;
    }

    #script-header {
        height: auto;
    }

    #script-header > .section-title {
        width: 1fr;
    }

    #script-block {
        background: $boost;
        padding: 1;
        margin-bottom: 1;
    }

    #installation-steps {
        height: auto;
        border: round $warning;
        padding: 0 1;
    }

    #installation-footer {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        entry: DistributionEntry,
        *,
        on_copy: Callable[[DistributionEntry], None],
        on_navigate: Callable[[str, int], None],
        show_instructions: bool,
    ) -> None:
        """Initialize with the entry to show.

        Args:
            entry: Distribution to show the guide for
            on_copy: Called with the entry when the user asks to copy its script
            on_navigate: Called with (entry id, offset) to switch to a neighbor
            show_instructions: Whether to show the generic installation steps
        """
        super().__init__()
        self._entry = entry
        self._on_copy = on_copy
        self._on_navigate = on_navigate
        self._show_instructions = show_instructions

    @property
    def entry(self) -> DistributionEntry:
        return self._entry

    def compose(self) -> ComposeResult:
        entry = self._entry
        with VerticalScroll(id="installation-dialog"):
            yield Label(f"{entry.name} Installation Guide", id="installation-title", markup=False)

            yield Label("Description", classes="section-title")
            yield Static(entry.description, id="installation-description", markup=False)

            yield Rule()

            yield Label("Prerequisites", classes="section-title")
            for line in numbered_prerequisites(entry):
                yield Label(line, classes="prerequisite", markup=False)

            yield Rule()

            with Horizontal(id="script-header"):
                yield Label("Installation Script", classes="section-title")
                yield Button("Copy Script", id="copy-script", variant="default")
            yield Static(entry.script, id="script-block", markup=False)

            if self._show_instructions:
                with Vertical(id="installation-steps"):
                    yield Label("Installation Instructions", classes="section-title")
                    for index, step in enumerate(INSTALLATION_STEPS, 1):
                        yield Label(f"{index}. {step}")

            yield Label("c copy · ←/→ switch · Esc close", id="installation-footer")

    def action_close(self) -> None:
        self.dismiss(self._entry.id)

    def action_copy_script(self) -> None:
        self._on_copy(self._entry)

    def action_previous_entry(self) -> None:
        self._on_navigate(self._entry.id, -1)

    def action_next_entry(self) -> None:
        self._on_navigate(self._entry.id, 1)

    @on(Button.Pressed, "#copy-script")
    def on_copy_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_copy_script()

    def on_click(self, event: Click) -> None:
        """Close when the click lands on the backdrop outside the dialog."""
        widget, _ = self.get_widget_at(event.screen_x, event.screen_y)
        if widget is self:
            self.action_close()
