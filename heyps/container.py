"""
Dependency injection container for managing application dependencies.
"""

import logging

from heyps.adapters.application.local_application_launcher import (
    LocalApplicationLauncher,
)
from heyps.adapters.application.spotlight_application_discovery import (
    SpotlightApplicationDiscovery,
)
from heyps.adapters.scripting.osa_scripting_bridge import OsaScriptingBridge
from heyps.config.app_registry import AppRegistry
from heyps.config.settings import Settings
from heyps.ports.application.application_discovery_port import (
    ApplicationDiscoveryPort,
)
from heyps.ports.application.application_launcher_port import ApplicationLauncherPort
from heyps.ports.scripting.scripting_bridge_port import ScriptingBridgePort
from heyps.use_cases.application.resolve_application import (
    ResolveApplicationUseCase,
)
from heyps.use_cases.scripting.run_script import RunScriptUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get settings loaded from the environment.

        Returns:
            Settings instance
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_app_registry(self) -> AppRegistry:
        if "app_registry" not in self._instances:
            self._instances["app_registry"] = AppRegistry()
        return self._instances["app_registry"]

    def get_application_discovery(self) -> ApplicationDiscoveryPort:
        """
        Get application discovery adapter instance.

        Returns:
            ApplicationDiscoveryPort implementation
        """
        if "application_discovery" not in self._instances:
            self._instances["application_discovery"] = SpotlightApplicationDiscovery(
                self._logger
            )
        return self._instances["application_discovery"]

    def get_application_launcher(self) -> ApplicationLauncherPort:
        """
        Get application launcher instance.

        Returns:
            ApplicationLauncherPort implementation
        """
        if "application_launcher" not in self._instances:
            self._instances["application_launcher"] = LocalApplicationLauncher(
                self._logger
            )
        return self._instances["application_launcher"]

    def get_scripting_bridge(self) -> ScriptingBridgePort:
        """
        Get scripting bridge instance.

        Returns:
            ScriptingBridgePort implementation
        """
        if "scripting_bridge" not in self._instances:
            self._instances["scripting_bridge"] = OsaScriptingBridge(self._logger)
        return self._instances["scripting_bridge"]

    def get_resolve_application_use_case(self) -> ResolveApplicationUseCase:
        """
        Get resolve application use case with injected dependencies.

        Returns:
            Configured ResolveApplicationUseCase
        """
        if "resolve_application_use_case" not in self._instances:
            discovery = self.get_application_discovery()
            self._instances["resolve_application_use_case"] = (
                ResolveApplicationUseCase(discovery, self._logger)
            )
        return self._instances["resolve_application_use_case"]

    def get_run_script_use_case(self) -> RunScriptUseCase:
        """
        Get run script use case with injected dependencies.

        Returns:
            Configured RunScriptUseCase
        """
        if "run_script_use_case" not in self._instances:
            self._instances["run_script_use_case"] = RunScriptUseCase(
                self.get_application_launcher(),
                self.get_scripting_bridge(),
                scripts_dir=self.get_settings().scripts_dir,
                logger=self._logger,
            )
        return self._instances["run_script_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
