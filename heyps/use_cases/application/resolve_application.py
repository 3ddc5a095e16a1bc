"""
Use case for choosing which installed application instance runs a script.
"""

import logging
from typing import Optional

from heyps.entities.app_family import AppFamily
from heyps.entities.application import Application, ResolvedApp
from heyps.entities.target import TargetKind, TargetQualifier
from heyps.exceptions import (
    AppNotInstalledError,
    DiscoveryError,
    HeyPsError,
    NoBetaInstalledError,
    VersionNotInstalledError,
)
from heyps.ports.application.application_discovery_port import (
    ApplicationDiscoveryPort,
)


class ResolveApplicationUseCase:
    """Use case for resolving (family, target) into one installed application."""

    def __init__(
        self,
        discovery: ApplicationDiscoveryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            discovery: Port listing installed application instances
            logger: Logger instance to use for logging
        """
        self._discovery = discovery
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, family: AppFamily, target: TargetQualifier) -> ResolvedApp:
        """
        Pick the installed instance of a family matching a target qualifier.

        When several instances tie, the first one discovered wins.

        Args:
            family: Application family to look for
            target: Latest, Beta or a specific release year

        Returns:
            The resolved application

        Raises:
            AppNotInstalledError: If no instance of the family is installed
            NoBetaInstalledError: If a beta is requested and none is installed
            VersionNotInstalledError: If the requested year is not installed
            DiscoveryError: If listing installed applications fails
        """
        try:
            self._logger.info(f"Resolving {family} for target: {target}")
            instances = self._discovery.list_instances(family.bundle_prefix)
        except HeyPsError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing installed applications: {e}")
            raise DiscoveryError(
                f"Failed to list installed {family.display_name} versions: {str(e)}"
            )

        if not instances:
            raise AppNotInstalledError(f"Adobe {family.display_name} is not installed")

        chosen = self._select(family, target, instances)
        self._logger.info(f"Resolved {family.abbreviation} to {chosen}")
        return ResolvedApp.from_application(chosen)

    def _select(
        self,
        family: AppFamily,
        target: TargetQualifier,
        instances: list[Application],
    ) -> Application:
        if target.kind is TargetKind.LATEST:
            return max(instances, key=Application.selection_key)

        if target.kind is TargetKind.BETA:
            betas = [app for app in instances if app.beta]
            if not betas:
                raise NoBetaInstalledError(
                    f"No beta version of Adobe {family.display_name} is installed"
                )
            return max(betas, key=lambda app: app.year or 0)

        matches = [
            app for app in instances if not app.beta and app.year == target.year
        ]
        if not matches:
            installed = ", ".join(app.version_label for app in instances)
            raise VersionNotInstalledError(
                f"Adobe {family.display_name} {target.year} is not installed "
                f"(installed: {installed})"
            )
        return matches[0]
