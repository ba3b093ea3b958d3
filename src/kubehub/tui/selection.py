"""Selection state for the catalog view.

The view is either Collapsed (no detail open) or Expanded on exactly one
entry. Transitions are pure functions so they can be tested without a
running app.
"""

import logging
from dataclasses import dataclass

from kubehub.catalog.store import CatalogStore
from kubehub.catalog.types import DistributionEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collapsed:
    """No entry is selected."""


@dataclass(frozen=True)
class Expanded:
    """One entry's installation detail is open.

    Attributes:
        entry: The entry being shown
    """

    entry: DistributionEntry


SelectionState = Collapsed | Expanded


def select_entry(state: SelectionState, store: CatalogStore, entry_id: str) -> SelectionState:
    """Expand the entry with the given id, replacing any open one.

    Ids always come from rendered entries, so a miss is a logic error. It is
    logged and the state is returned unchanged.

    Args:
        state: Current selection state
        store: Catalog to look the id up in
        entry_id: Id of the entry to expand

    Returns:
        Expanded(entry) for a known id, otherwise the unchanged state
    """
    entry = store.get_entry(entry_id)
    if entry is None:
        logger.warning("Ignoring selection of unknown distribution %r", entry_id)
        return state
    logger.debug("Selected distribution %s", entry.id)
    return Expanded(entry)


def dismiss_selection(state: SelectionState) -> SelectionState:
    """Collapse the view from any state."""
    if isinstance(state, Expanded):
        logger.debug("Dismissed distribution %s", state.entry.id)
    return Collapsed()
