"""Launch seam between the CLI and the Textual event loop.

`kubehub dash` builds a KubeHubApp and hands it to a TuiRunner. Production
blocks in Textual until the user quits; tests swap in FakeTuiRunner to check
what would have been launched and then drive it themselves with run_test().
"""

import logging
from abc import ABC, abstractmethod

from kubehub.tui.app import KubeHubApp

logger = logging.getLogger(__name__)


class TuiRunner(ABC):
    """Starts a catalog dashboard."""

    @abstractmethod
    def run(self, app: KubeHubApp) -> None:
        """Start the dashboard and return once it is done.

        Args:
            app: Fully constructed dashboard to start
        """
        ...


class RealTuiRunner(TuiRunner):
    """Blocks in Textual's event loop until the dashboard exits."""

    def run(self, app: KubeHubApp) -> None:
        logger.debug("Starting dashboard")
        app.run()
        logger.debug("Dashboard exited with return code %s", app.return_code)


class FakeTuiRunner(TuiRunner):
    """Records launched dashboards without entering the event loop."""

    def __init__(self) -> None:
        self._apps_run: list[KubeHubApp] = []

    def run(self, app: KubeHubApp) -> None:
        self._apps_run.append(app)

    @property
    def apps_run(self) -> list[KubeHubApp]:
        """Dashboards handed to run(), oldest first.

        This property is for test assertions only.
        """
        return self._apps_run
