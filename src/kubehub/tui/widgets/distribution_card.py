"""Summary card widget for one distribution."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Label, Static

from kubehub.catalog.display import summarize_description
from kubehub.catalog.types import DistributionEntry

# Cards show a flowed description cut to this many characters
DESCRIPTION_WIDTH = 120


class DistributionCard(Vertical):
    """Card showing a distribution's name, short description and a detail trigger.

    The "View Installation" button carries the entry id in its name so the
    app can look the entry up when the button is pressed.
    """

    DEFAULT_CSS = """
    DistributionCard {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }

    DistributionCard:focus-within {
        border: round $accent;
    }

    DistributionCard > .card-title {
        text-style: bold;
        width: 100%;
        margin-bottom: 1;
    }

    DistributionCard > .card-description {
        color: $text-muted;
        height: auto;
        margin-bottom: 1;
    }

    DistributionCard > .view-installation {
        width: 100%;
    }
    """

    def __init__(self, entry: DistributionEntry) -> None:
        """Initialize card for an entry.

        Args:
            entry: The distribution to summarize
        """
        super().__init__(id=f"card-{entry.id}")
        self._entry = entry

    @property
    def entry(self) -> DistributionEntry:
        return self._entry

    def compose(self) -> ComposeResult:
        yield Label(self._entry.name, classes="card-title", markup=False)
        yield Static(
            summarize_description(self._entry.description, DESCRIPTION_WIDTH),
            classes="card-description",
            markup=False,
        )
        yield Button(
            "View Installation",
            id=f"view-{self._entry.id}",
            name=self._entry.id,
            classes="view-installation",
            variant="primary",
        )
