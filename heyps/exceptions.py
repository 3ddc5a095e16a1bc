"""
Custom exceptions for the application.
"""


class HeyPsError(Exception):
    """Base exception class for heyps errors."""

    pass


class ConfigurationError(HeyPsError):
    """Exception raised for configuration errors."""

    pass


class UnknownAppError(HeyPsError):
    """Exception raised when an application abbreviation is not registered."""

    pass


class InvalidTargetError(HeyPsError):
    """Exception raised when a target qualifier cannot be parsed."""

    pass


class DiscoveryError(HeyPsError):
    """Exception raised when installed applications cannot be listed."""

    pass


class ResolutionError(HeyPsError):
    """Base exception for failures to pick an installed application instance."""

    pass


class AppNotInstalledError(ResolutionError):
    """Exception raised when no instance of the application family is installed."""

    pass


class NoBetaInstalledError(ResolutionError):
    """Exception raised when a beta was requested but none is installed."""

    pass


class VersionNotInstalledError(ResolutionError):
    """Exception raised when the requested release year is not installed."""

    pass


class ScriptNotFoundError(HeyPsError):
    """Exception raised when the script file does not exist."""

    pass


class UnsupportedScriptTypeError(HeyPsError):
    """Exception raised when the script extension is not supported by the application."""

    pass


class ExecutionError(HeyPsError):
    """Exception raised when launching the application or running the script fails.

    The message carries the external command's own error text unchanged.
    """

    pass
