"""
Application discovery port interface for listing installed application instances.
"""

from abc import ABC, abstractmethod

from heyps.entities.application import Application


class ApplicationDiscoveryPort(ABC):
    """Port interface for finding installed applications."""

    @abstractmethod
    def list_instances(self, bundle_prefix: str) -> list[Application]:
        """
        List installed applications carrying a bundle identifier.

        Args:
            bundle_prefix: Bundle identifier shared by every version of the family
                (e.g. com.adobe.Photoshop), matched exactly, ignoring case

        Returns:
            Application entities in a stable order (empty if none are installed)

        Raises:
            DiscoveryError: If the discovery mechanism itself fails
        """
        pass
