"""Main Textual application for the distribution catalog."""

import logging
from functools import partial
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, VerticalScroll
from textual.widgets import Button, Footer, Header, Label

from kubehub.catalog.store import CatalogStore
from kubehub.catalog.types import DistributionEntry
from kubehub.config import KubeHubConfig
from kubehub.integrations.clipboard.abc import Clipboard
from kubehub.tui.screens.help_screen import HelpScreen
from kubehub.tui.screens.installation_screen import InstallationScreen
from kubehub.tui.selection import (
    Collapsed,
    Expanded,
    SelectionState,
    dismiss_selection,
    select_entry,
)
from kubehub.tui.widgets.distribution_card import DistributionCard

logger = logging.getLogger(__name__)

INTRO_TEXT = (
    "Explore various Kubernetes distributions with their installation scripts and "
    "prerequisites. Perfect for development, testing, and production environments."
)
HINT_TEXT = 'Press Enter on "View Installation" to see prerequisites and installation scripts.'


class KubeHubApp(App):
    """Interactive catalog of Kubernetes distributions.

    Shows one card per distribution and opens an installation guide for the
    selected one. At most one guide is open at a time.
    """

    TITLE = "Kubernetes Hub"
    SUB_TITLE = "Distributions and installation scripts"
    CSS_PATH = Path(__file__).parent / "styles" / "catalog.tcss"
    AUTO_FOCUS = ".view-installation"

    BINDINGS = [
        Binding("q", "exit_app", "Quit"),
        Binding("?", "help", "Help"),
        Binding("j", "focus_next", "Next", show=False),
        Binding("k", "focus_previous", "Previous", show=False),
    ]

    def __init__(
        self,
        store: CatalogStore,
        clipboard: Clipboard,
        config: KubeHubConfig,
    ) -> None:
        """Initialize the catalog app.

        Args:
            store: Catalog to display
            clipboard: Clipboard used by the copy action
            config: View options
        """
        super().__init__()
        self._store = store
        self._clipboard = clipboard
        self._config = config
        self._selection: SelectionState = Collapsed()

    @property
    def selection(self) -> SelectionState:
        """Current selection state."""
        return self._selection

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()
        with VerticalScroll(id="main-container"):
            yield Label(INTRO_TEXT, id="intro")
            with Grid(id="catalog-grid"):
                for entry in self._store.list_all():
                    yield DistributionCard(entry)
            yield Label(HINT_TEXT, id="hint")
        yield Footer()

    def open_installation(self, entry_id: str) -> None:
        """Show the installation guide for an entry, replacing any open guide.

        Unknown ids leave the view unchanged.

        Args:
            entry_id: Id of the entry to show
        """
        state = select_entry(self._selection, self._store, entry_id)
        if state is self._selection or not isinstance(state, Expanded):
            return

        self._selection = state
        self._pop_installation_screens()
        screen = InstallationScreen(
            state.entry,
            on_copy=self.copy_script,
            on_navigate=self._open_neighbor,
            show_instructions=self._config.show_instructions,
        )
        self.push_screen(screen, callback=self._on_installation_closed)

    def close_installation(self) -> None:
        """Close any open installation guide and collapse the selection."""
        self._pop_installation_screens()
        self._selection = dismiss_selection(self._selection)

    def copy_script(self, entry: DistributionEntry) -> None:
        """Copy an entry's script to the clipboard without blocking the view.

        Args:
            entry: Entry whose script is copied verbatim
        """
        self.run_worker(
            partial(self._write_clipboard, entry),
            thread=True,
            group="clipboard",
            exit_on_error=False,
        )

    def _write_clipboard(self, entry: DistributionEntry) -> None:
        """Write the script from a worker thread and report the outcome."""
        success = self._clipboard.copy(entry.script)
        logger.debug("Copy of %s script %s", entry.id, "succeeded" if success else "failed")
        if self._config.copy_notice:
            self.call_from_thread(self._report_copy, entry, success)

    def _report_copy(self, entry: DistributionEntry, success: bool) -> None:
        if success:
            self.notify(f"Copied {entry.name} installation script", timeout=3)
        else:
            self.notify(
                "Clipboard unavailable. Copy the script manually.",
                severity="warning",
                timeout=5,
            )

    def _pop_installation_screens(self) -> None:
        """Pop the open guide along with any screen stacked above it, such as help."""
        while any(isinstance(screen, InstallationScreen) for screen in self.screen_stack):
            self.pop_screen()

    def _open_neighbor(self, entry_id: str, offset: int) -> None:
        """Switch the open guide to the entry offset positions away, wrapping around."""
        ids = [entry.id for entry in self._store.list_all()]
        if entry_id not in ids:
            return
        target = ids[(ids.index(entry_id) + offset) % len(ids)]
        self.open_installation(target)

    def _on_installation_closed(self, entry_id: str | None) -> None:
        """Collapse the selection when the user closes the open guide."""
        if isinstance(self._selection, Expanded) and self._selection.entry.id == entry_id:
            self._selection = dismiss_selection(self._selection)

    def action_exit_app(self) -> None:
        """Quit the application."""
        self.exit()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    @on(Button.Pressed, ".view-installation")
    def on_view_installation(self, event: Button.Pressed) -> None:
        """Open the guide for the card whose button was pressed."""
        if event.button.name is not None:
            self.open_installation(event.button.name)
