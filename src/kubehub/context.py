"""Context object bundling kubehub's injectable dependencies.

KubeHubContext carries the catalog store, clipboard, config and TUI runner
so CLI commands can be exercised with fakes and without starting Textual.
"""

from dataclasses import dataclass

from kubehub.catalog.store import CatalogStore, StaticCatalogStore
from kubehub.config import KubeHubConfig
from kubehub.integrations.clipboard.abc import Clipboard
from kubehub.integrations.clipboard.fake import FakeClipboard
from kubehub.integrations.clipboard.real import RealClipboard
from kubehub.tui.runner import FakeTuiRunner, RealTuiRunner, TuiRunner


@dataclass(frozen=True)
class KubeHubContext:
    """Dependencies shared by every kubehub command.

    Follows the ABC/Real/Fake pattern: production code gets real
    implementations from for_production(), tests get fakes from for_test().
    """

    store: CatalogStore
    clipboard: Clipboard
    config: KubeHubConfig
    tui_runner: TuiRunner

    @classmethod
    def for_production(cls, config: KubeHubConfig) -> "KubeHubContext":
        """Create production context with real implementations.

        Args:
            config: Loaded user configuration

        Returns:
            KubeHubContext configured for production use
        """
        return cls(
            store=StaticCatalogStore(),
            clipboard=RealClipboard(),
            config=config,
            tui_runner=RealTuiRunner(),
        )

    @classmethod
    def for_test(
        cls,
        *,
        store: CatalogStore | None = None,
        clipboard: Clipboard | None = None,
        config: KubeHubConfig | None = None,
        tui_runner: TuiRunner | None = None,
    ) -> "KubeHubContext":
        """Create test context with injectable fakes.

        Args:
            store: Optional CatalogStore. If None, uses the built-in catalog.
            clipboard: Optional Clipboard. If None, creates FakeClipboard.
            config: Optional config. If None, uses KubeHubConfig.default().
            tui_runner: Optional TuiRunner. If None, creates FakeTuiRunner.

        Returns:
            KubeHubContext configured for testing

        Example:
            tui_runner = FakeTuiRunner()
            ctx = KubeHubContext.for_test(tui_runner=tui_runner)
            CliRunner().invoke(cli, ["dash"], obj=ctx)
            assert len(tui_runner.apps_run) == 1
        """
        return cls(
            store=store or StaticCatalogStore(),
            clipboard=clipboard or FakeClipboard(),
            config=config or KubeHubConfig.default(),
            tui_runner=tui_runner or FakeTuiRunner(),
        )
