"""
Use case for running a script file inside a resolved application.
"""

import logging
import os
from typing import Optional

from heyps.entities.app_family import AppFamily
from heyps.entities.script import ScriptRequest, ScriptResult
from heyps.exceptions import (
    ExecutionError,
    HeyPsError,
    ScriptNotFoundError,
    UnsupportedScriptTypeError,
)
from heyps.ports.application.application_launcher_port import ApplicationLauncherPort
from heyps.ports.scripting.scripting_bridge_port import ScriptingBridgePort


class RunScriptUseCase:
    """Use case for handing a script to an application's scripting bridge."""

    def __init__(
        self,
        launcher: ApplicationLauncherPort,
        bridge: ScriptingBridgePort,
        scripts_dir: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            launcher: Port used to launch or activate the application
            bridge: Port used to submit the script
            scripts_dir: Fallback directory for relative script paths
            logger: Logger instance to use for logging
        """
        self._launcher = launcher
        self._bridge = bridge
        self._scripts_dir = scripts_dir
        self._logger = logger or logging.getLogger(__name__)

    def locate_script(self, file_path: str) -> str:
        """
        Turn a user-supplied script path into an absolute path.

        Relative paths missing from the working directory are looked up in the
        scripts directory. The path is returned even when it does not exist;
        existence is checked by execute().
        """
        path = os.path.expanduser(file_path)
        if os.path.isabs(path) or os.path.exists(path):
            return os.path.abspath(path)
        if self._scripts_dir:
            candidate = os.path.join(self._scripts_dir, path)
            if os.path.exists(candidate):
                self._logger.debug(f"Using script from scripts directory: {candidate}")
                return os.path.abspath(candidate)
        return os.path.abspath(path)

    def validate_script(self, file_path: str, family: AppFamily) -> None:
        """
        Check the script locally, before any process is spawned.

        Raises:
            UnsupportedScriptTypeError: If the family cannot run this file type
            ScriptNotFoundError: If the file does not exist
        """
        extension = os.path.splitext(file_path)[1]
        if not family.supports(extension):
            supported = ", ".join(family.script_extensions)
            raise UnsupportedScriptTypeError(
                f"Unsupported file type '{extension or file_path}' for "
                f"{family.display_name} (supported: {supported})"
            )
        if not os.path.isfile(file_path):
            raise ScriptNotFoundError(f"Script file does not exist: {file_path}")

    def execute(self, request: ScriptRequest) -> ScriptResult:
        """
        Validate the script, activate the application and run the script.

        Raises:
            UnsupportedScriptTypeError: If the file type is not supported
            ScriptNotFoundError: If the file does not exist
            ExecutionError: If launching or running reports a failure
        """
        self.validate_script(request.file_path, request.family)
        app = request.resolved_app
        try:
            self._logger.info(
                f"Running {request.file_path} in {app.name} ({app.version_label})"
            )
            self._launcher.activate(app)
            result = self._bridge.run_script(request)
            self._logger.info("Script finished without a reported error")
            return result
        except HeyPsError:
            raise
        except Exception as e:
            self._logger.error(f"Error running script: {e}")
            raise ExecutionError(f"Failed to run {request.file_path}: {str(e)}")
