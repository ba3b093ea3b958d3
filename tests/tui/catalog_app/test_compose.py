"""Tests for KubeHubApp composition."""

import pytest

from kubehub.catalog.store import StaticCatalogStore
from kubehub.config import KubeHubConfig
from kubehub.integrations.clipboard.fake import FakeClipboard
from kubehub.tui.app import KubeHubApp
from kubehub.tui.screens.help_screen import HelpScreen
from kubehub.tui.selection import Collapsed
from kubehub.tui.widgets.distribution_card import DistributionCard
from tests.fakes.catalog_store import FakeCatalogStore, make_entry


class TestKubeHubAppCompose:
    """Tests for app composition and layout."""

    @pytest.mark.asyncio
    async def test_one_card_per_distribution_in_order(self) -> None:
        """App renders a card for each entry in catalog order."""
        store = StaticCatalogStore()
        app = KubeHubApp(store, FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.pause()
            cards = list(app.query(DistributionCard))
            assert [card.entry.id for card in cards] == [entry.id for entry in store.list_all()]

    @pytest.mark.asyncio
    async def test_each_card_has_view_button(self) -> None:
        """Every card carries a View Installation button named after its entry."""
        store = FakeCatalogStore((make_entry("alpha"), make_entry("beta")))
        app = KubeHubApp(store, FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.pause()
            buttons = list(app.query(".view-installation"))
            assert [button.name for button in buttons] == ["alpha", "beta"]

    @pytest.mark.asyncio
    async def test_compose_reads_store_once(self) -> None:
        """The catalog is read a single time when the grid is built."""
        store = FakeCatalogStore((make_entry("alpha"), make_entry("beta")))
        app = KubeHubApp(store, FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.pause()
            assert store.list_count == 1

    @pytest.mark.asyncio
    async def test_starts_collapsed(self) -> None:
        """No guide is open when the app starts."""
        app = KubeHubApp(StaticCatalogStore(), FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.selection == Collapsed()
            assert len(app.screen_stack) == 1

    @pytest.mark.asyncio
    async def test_empty_catalog(self) -> None:
        """An empty catalog renders no cards."""
        app = KubeHubApp(FakeCatalogStore(), FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.pause()
            assert len(app.query(DistributionCard)) == 0

    @pytest.mark.asyncio
    async def test_quit_on_q(self) -> None:
        """Pressing q on the catalog quits the app."""
        app = KubeHubApp(StaticCatalogStore(), FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.press("q")
            # App should have exited

    @pytest.mark.asyncio
    async def test_help_screen_opens_and_closes(self) -> None:
        """? opens the help modal and escape closes it."""
        app = KubeHubApp(StaticCatalogStore(), FakeClipboard(), KubeHubConfig.default())

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("?")
            await pilot.pause()
            assert isinstance(app.screen, HelpScreen)

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, HelpScreen)
