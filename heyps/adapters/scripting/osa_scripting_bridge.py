"""
Scripting bridge adapter backed by AppleScript (osascript) and LaunchServices (open).
"""

import logging
import subprocess
from typing import Optional

from heyps.entities.script import ScriptRequest, ScriptResult, ScriptType
from heyps.exceptions import ExecutionError
from heyps.ports.scripting.scripting_bridge_port import ScriptingBridgePort


def escape_applescript_string(value: str) -> str:
    """Escape a value for use inside a double-quoted AppleScript string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_tell_statement(request: ScriptRequest) -> str:
    app_name = escape_applescript_string(request.resolved_app.name)
    script_path = escape_applescript_string(request.file_path)
    return (
        f'tell application "{app_name}" to '
        f'{request.family.script_verb} "{script_path}"'
    )


class OsaScriptingBridge(ScriptingBridgePort):
    """
    Runs ExtendScript files (.jsx/.js) through osascript, and UXP scripts (.psjs)
    by handing the file to the application with 'open -a'.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def run_script(self, request: ScriptRequest) -> ScriptResult:
        if request.script_type is ScriptType.PSJS:
            cmd = [
                "open",
                "-a",
                request.resolved_app.bundle_identifier_or_path,
                request.file_path,
            ]
        else:
            cmd = ["osascript", "-e", build_tell_statement(request)]

        self._logger.debug(f"Running scripting bridge command: {cmd}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            self._logger.error(f"Failed to start {cmd[0]}: {e}")
            raise ExecutionError(f"Failed to execute command: {e}")

        if result.returncode != 0:
            stderr = result.stderr.strip() or f"exit status {result.returncode}"
            self._logger.error(f"{cmd[0]} exited with {result.returncode}: {stderr}")
            raise ExecutionError(f"Failed to execute command: {stderr}")

        return ScriptResult(output=result.stdout.strip())
