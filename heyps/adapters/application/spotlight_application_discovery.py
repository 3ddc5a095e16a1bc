import logging
import subprocess
from typing import Optional

from heyps.entities.application import Application
from heyps.exceptions import DiscoveryError
from heyps.ports.application.application_discovery_port import (
    ApplicationDiscoveryPort,
)


class SpotlightApplicationDiscovery(ApplicationDiscoveryPort):
    """Finds installed application bundles through the Spotlight index (mdfind)."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def list_instances(self, bundle_prefix: str) -> list[Application]:
        # Exact identifier, "c" for case-insensitive; releases and betas share it
        query = f'kMDItemCFBundleIdentifier == "{bundle_prefix}"c'
        self._logger.debug(f"Running mdfind query: {query}")
        try:
            result = subprocess.run(
                ["mdfind", query],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            self._logger.error(f"Failed to run mdfind: {e}")
            raise DiscoveryError(f"Failed to query installed applications: {e}")

        if result.returncode != 0:
            stderr = result.stderr.strip()
            self._logger.error(f"mdfind exited with {result.returncode}: {stderr}")
            raise DiscoveryError(f"Failed to query installed applications: {stderr}")

        paths = sorted(self._top_level_bundles(result.stdout.splitlines()))
        apps = [Application.from_bundle_path(p) for p in paths]
        self._logger.info(f"Found {len(apps)} installed instances of {bundle_prefix}")
        return apps

    @staticmethod
    def _top_level_bundles(lines: list[str]) -> set[str]:
        """Keep .app bundles that are not nested inside another bundle (helpers, droplets)."""
        bundles = set()
        for line in lines:
            path = line.strip().rstrip("/")
            if not path.endswith(".app"):
                continue
            if ".app/" in path:
                continue
            bundles.add(path)
        return bundles
