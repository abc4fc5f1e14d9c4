"""softwareupdate backend implementation.

Lists and installs updates with macOS's softwareupdate tool and finds
running processes with pgrep and ps.
"""

import logging
import subprocess

from secupdate.backends.base import BackendError, UpdateBackend
from secupdate.core.settings import UpdaterSettings
from secupdate.models.process import ProcessInfo
from secupdate.utils.shell import CommandResult, command_exists, run_command, run_interactive

logger = logging.getLogger(__name__)


class SoftwareUpdateBackend(UpdateBackend):
    """Backend driving /usr/sbin/softwareupdate.

    Both listing and installing pass --include-config-data so that
    background configuration-data updates (XProtect, MRTConfigData) are
    part of the catalog.
    """

    _CONFIG_DATA_FLAG = "--include-config-data"

    # pgrep exits 1 when nothing matched
    _PGREP_NO_MATCH = 1

    def __init__(self, settings: UpdaterSettings | None = None) -> None:
        """Initialize the backend.

        Args:
            settings: Tool paths, timeouts and process patterns.
        """
        self._settings = settings or UpdaterSettings()

    @property
    def settings(self) -> UpdaterSettings:
        """Return the settings this backend was built with."""
        return self._settings

    def is_available(self) -> bool:
        """Check if softwareupdate is available.

        pgrep and ps are only needed for the Safari check, which handles
        their absence itself.
        """
        return command_exists(self._settings.softwareupdate_path)

    def list_updates(self) -> CommandResult:
        """Run softwareupdate -l with stderr merged into stdout.

        A timeout is reported as a failed listing rather than raised.
        """
        args = [self._settings.softwareupdate_path, "-l", self._CONFIG_DATA_FLAG]
        logger.info("Listing updates: %s", " ".join(args))

        try:
            return run_command(
                args,
                timeout=self._settings.list_timeout_seconds,
                merge_stderr=True,
            )
        except subprocess.TimeoutExpired:
            msg = f"softwareupdate -l timed out after {self._settings.list_timeout_seconds}s"
            logger.warning(msg)
            return CommandResult(stdout="", stderr=msg, returncode=124)
        except OSError as e:
            msg = f"Failed to run softwareupdate: {e}"
            raise BackendError(msg) from e

    def install_update(self, label: str) -> int:
        """Run softwareupdate -i for one label with the terminal inherited.

        Raises:
            subprocess.TimeoutExpired: If the configured install timeout expires.
            BackendError: If softwareupdate cannot be executed.
        """
        args = [self._settings.softwareupdate_path, "-i", self._CONFIG_DATA_FLAG, label]
        logger.info("Installing update: %s", " ".join(args))

        try:
            return run_interactive(args, timeout=self._settings.install_timeout_seconds)
        except OSError as e:
            msg = f"Failed to run softwareupdate: {e}"
            raise BackendError(msg) from e

    def application_patterns(self, application: str) -> list[str]:
        """Return the configured process patterns for an application."""
        return self._settings.patterns_for(application)

    def find_processes(self, pattern: str) -> list[ProcessInfo]:
        """Search process command lines with pgrep -f, then name them with ps.

        Raises:
            BackendError: If pgrep or ps fail to run or pgrep reports an error.
        """
        try:
            result = run_command([self._settings.pgrep_path, "-f", pattern])
        except OSError as e:
            msg = f"Failed to run pgrep: {e}"
            raise BackendError(msg) from e

        if result.returncode == self._PGREP_NO_MATCH:
            return []
        if not result.success:
            msg = f"pgrep failed ({result.returncode}): {result.stderr.strip() or 'unknown error'}"
            raise BackendError(msg)

        pids = [line.strip() for line in result.stdout.splitlines() if line.strip().isdigit()]
        if not pids:
            return []

        logger.debug("pgrep -f %r matched PIDs: %s", pattern, ", ".join(pids))
        return self._describe_processes(pids)

    def _describe_processes(self, pids: list[str]) -> list[ProcessInfo]:
        """Look up command names for PIDs with ps.

        Processes that exited between pgrep and ps are simply missing from
        the output, so a non-zero ps exit status is not an error here.

        Args:
            pids: Process IDs as strings.

        Returns:
            ProcessInfo for each PID ps still reported.
        """
        try:
            result = run_command([self._settings.ps_path, "-p", ",".join(pids), "-o", "pid=,comm="])
        except OSError as e:
            msg = f"Failed to run ps: {e}"
            raise BackendError(msg) from e

        processes: list[ProcessInfo] = []
        for line in result.stdout.splitlines():
            process = self._parse_ps_line(line)
            if process is not None:
                processes.append(process)
        return processes

    def _parse_ps_line(self, line: str) -> ProcessInfo | None:
        """Parse one ``pid comm`` line of ps output.

        Args:
            line: Line from ps -o pid=,comm=.

        Returns:
            ProcessInfo if parsing succeeds, None otherwise.
        """
        parts = line.strip().split(None, 1)
        if len(parts) != 2 or not parts[0].isdigit():
            logger.debug("Skipping malformed ps line: %r", line[:100])
            return None
        return ProcessInfo(pid=int(parts[0]), command=parts[1].strip())
