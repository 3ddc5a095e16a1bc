from abc import ABC, abstractmethod

from heyps.entities.application import ResolvedApp


class ApplicationLauncherPort(ABC):
    @abstractmethod
    def activate(self, app: ResolvedApp) -> None:
        """
        Launch the given application, or bring it to the front if it is running.

        Raises:
            ExecutionError: If the launch command reports a failure
        """
        pass
