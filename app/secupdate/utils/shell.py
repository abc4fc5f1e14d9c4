"""Shell execution utilities.

Provides subprocess execution with captured or inherited output.
"""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command (empty when merged into stdout).
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Return stdout followed by stderr."""
        return self.stdout + self.stderr


def run_command(
    args: list[str],
    *,
    check: bool = False,
    timeout: float | None = None,
    merge_stderr: bool = False,
) -> CommandResult:
    """Execute a command and return its captured output.

    Args:
        args: Command and arguments to execute.
        check: If True, raise CalledProcessError on non-zero exit.
        timeout: Maximum time in seconds to wait. None waits indefinitely.
        merge_stderr: If True, stderr is interleaved into stdout.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.CalledProcessError: If check=True and command fails.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
        text=True,
        check=check,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=result.returncode,
    )


def run_interactive(args: list[str], *, timeout: float | None = None) -> int:
    """Execute a command inheriting the terminal.

    Output is not captured, so the command's progress reaches the user
    directly.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait. None waits indefinitely.

    Returns:
        Exit code of the command.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(args, check=False, timeout=timeout)
    return result.returncode


def command_exists(name: str) -> bool:
    """Check if a command exists in PATH or as an executable path.

    Args:
        name: Command name or absolute path to check.

    Returns:
        True if command exists, False otherwise.
    """
    if Path(name).is_absolute():
        return Path(name).is_file()
    return shutil.which(name) is not None
