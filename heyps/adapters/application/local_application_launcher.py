import logging
import subprocess
from typing import Optional

from heyps.entities.application import ResolvedApp
from heyps.exceptions import ExecutionError
from heyps.ports.application.application_launcher_port import ApplicationLauncherPort


class LocalApplicationLauncher(ApplicationLauncherPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def activate(self, app: ResolvedApp) -> None:
        # Explicit bundle path, so side-by-side versions are never confused
        cmd = ["open", "-a", app.bundle_identifier_or_path]
        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as e:
            self._logger.error(f"Failed to launch application {app.name}: {e}")
            raise ExecutionError(f"Failed to launch application: {e}")

        if result.returncode != 0:
            stderr = result.stderr.strip() or f"exit status {result.returncode}"
            self._logger.error(f"Failed to launch application {app.name}: {stderr}")
            raise ExecutionError(f"Failed to launch {app.name}: {stderr}")

        self._logger.info(f"Activated macOS app via 'open': {app.bundle_identifier_or_path}")
