"""
Scripting bridge port interface for running scripts inside an application.
"""

from abc import ABC, abstractmethod

from heyps.entities.script import ScriptRequest, ScriptResult


class ScriptingBridgePort(ABC):
    """Port interface for the inter-application scripting mechanism."""

    @abstractmethod
    def run_script(self, request: ScriptRequest) -> ScriptResult:
        """
        Ask the resolved application to execute the script file.

        Args:
            request: Validated request holding the absolute script path

        Returns:
            ScriptResult with any output the bridge reported

        Raises:
            ExecutionError: With the bridge's own error text on failure
        """
        pass
