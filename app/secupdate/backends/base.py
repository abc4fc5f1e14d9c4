"""Abstract base class for update backends.

A backend is the only place secupdate touches the operating system: it
lists the update catalog, installs single updates and searches the
process table. Classification and gating logic only talk to this
interface, so they can run against a fake backend in tests.
"""

from abc import ABC, abstractmethod

from secupdate.models.process import ProcessInfo
from secupdate.utils.shell import CommandResult


class BackendError(Exception):
    """Raised when a backend's external tool cannot be used."""


class UpdateBackend(ABC):
    """Abstract base class for all update backends.

    Example:
        >>> backend = SoftwareUpdateBackend()
        >>> if backend.is_available():
        ...     result = backend.list_updates()
        ...     print(result.output)
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the backend's tools exist on this system.

        Returns:
            True if the backend can be used, False otherwise.
        """

    @abstractmethod
    def list_updates(self) -> CommandResult:
        """List available updates, including configuration-data updates.

        Returns:
            CommandResult whose output holds the raw catalog text.
        """

    @abstractmethod
    def install_update(self, label: str) -> int:
        """Install a single update, including configuration-data updates.

        Args:
            label: The update label to install.

        Returns:
            Exit code of the installer (0 = success).
        """

    @abstractmethod
    def find_processes(self, pattern: str) -> list[ProcessInfo]:
        """Find processes whose command line contains a pattern.

        Args:
            pattern: Substring to search for in process command lines.

        Returns:
            Matching processes, possibly empty.

        Raises:
            BackendError: If the process table cannot be searched.
        """

    def application_patterns(self, application: str) -> list[str]:
        """Return the command-line patterns identifying an application.

        Subclasses override this to search for more than the bare name.
        """
        return [application]

    def find_application_processes(self, application: str) -> list[ProcessInfo]:
        """Find every running process belonging to an application.

        Runs one search per pattern and merges the hits, keeping the
        first occurrence of each PID.

        Args:
            application: Application name, e.g. "Safari".

        Returns:
            Matching processes in discovery order.
        """
        seen: set[int] = set()
        processes: list[ProcessInfo] = []
        for pattern in self.application_patterns(application):
            for process in self.find_processes(pattern):
                if process.pid not in seen:
                    seen.add(process.pid)
                    processes.append(process)
        return processes

    def is_application_running(self, application: str) -> bool:
        """Check if any process of an application is running."""
        return bool(self.find_application_processes(application))
