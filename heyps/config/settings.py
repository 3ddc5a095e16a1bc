"""
Configuration settings for the application.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from heyps.entities.target import TargetQualifier
from heyps.exceptions import ConfigurationError, InvalidTargetError


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, load_env_file: bool = True):
        if load_env_file:
            # Load environment variables from .env file
            _ = load_dotenv()

        self.scripts_dir: str = self._get_scripts_dir()
        self.default_target: str = self._get_default_target(
            self._get_env("HEYPS_DEFAULT_TARGET", "latest")
        )
        self.log_level: int = self._get_log_level(
            self._get_env("HEYPS_LOG_LEVEL", "WARNING")
        )

    def _get_scripts_dir(self) -> str:
        """Resolve the scripts directory: HEYPS_SCRIPTS_DIR, then XDG_DATA_HOME/scripts."""
        explicit = self._get_optional_env("HEYPS_SCRIPTS_DIR")
        if explicit:
            return os.path.abspath(os.path.expanduser(explicit))
        data_home = self._get_optional_env("XDG_DATA_HOME") or os.path.join(
            os.path.expanduser("~"), ".local", "share"
        )
        return os.path.join(os.path.abspath(os.path.expanduser(data_home)), "scripts")

    def _get_default_target(self, value: str) -> str:
        try:
            TargetQualifier.parse(value)
        except InvalidTargetError:
            raise ConfigurationError(f"Invalid HEYPS_DEFAULT_TARGET: {value}")
        return value

    def _get_log_level(self, value: str) -> int:
        level = logging.getLevelName(value.strip().upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Invalid HEYPS_LOG_LEVEL: {value}")
        return level

    def _get_optional_env(self, key: str) -> Optional[str]:
        """Get an environment variable, treating empty values as unset."""
        value = os.getenv(key)
        return value or None

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default
