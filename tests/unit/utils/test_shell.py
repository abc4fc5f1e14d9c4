"""Unit tests for shell execution utilities."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from secupdate.utils.shell import CommandResult, command_exists, run_command, run_interactive


class TestCommandResult:
    """Tests for CommandResult dataclass."""

    def test_success(self) -> None:
        """Exit code zero is success."""
        assert CommandResult(stdout="", stderr="", returncode=0).success
        assert not CommandResult(stdout="", stderr="", returncode=1).success

    def test_output_concatenates_streams(self) -> None:
        """output is stdout followed by stderr."""
        assert CommandResult(stdout="out\n", stderr="err\n", returncode=0).output == "out\nerr\n"


class TestRunCommand:
    """Tests for run_command function."""

    @patch("secupdate.utils.shell.subprocess.run")
    def test_captures_separately(self, mock_run: MagicMock) -> None:
        """stdout and stderr are captured separately by default."""
        mock_run.return_value = MagicMock(stdout="out", stderr="err", returncode=0)

        result = run_command(["softwareupdate", "-l"])

        assert result == CommandResult(stdout="out", stderr="err", returncode=0)
        assert mock_run.call_args.kwargs["stderr"] == subprocess.PIPE
        assert mock_run.call_args.kwargs["timeout"] is None

    @patch("secupdate.utils.shell.subprocess.run")
    def test_merge_stderr(self, mock_run: MagicMock) -> None:
        """merge_stderr redirects stderr into stdout."""
        mock_run.return_value = MagicMock(stdout="combined", stderr=None, returncode=1)

        result = run_command(["softwareupdate", "-l"], merge_stderr=True)

        assert mock_run.call_args.kwargs["stderr"] == subprocess.STDOUT
        assert result.stdout == "combined"
        assert result.stderr == ""
        assert result.returncode == 1

    @patch("secupdate.utils.shell.subprocess.run")
    def test_passes_timeout(self, mock_run: MagicMock) -> None:
        """A timeout is forwarded to subprocess.run."""
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)

        run_command(["true"], timeout=5.0)

        assert mock_run.call_args.kwargs["timeout"] == 5.0


class TestRunInteractive:
    """Tests for run_interactive function."""

    @patch("secupdate.utils.shell.subprocess.run")
    def test_returns_exit_code(self, mock_run: MagicMock) -> None:
        """run_interactive returns the subprocess exit code."""
        mock_run.return_value = MagicMock(returncode=3)

        assert run_interactive(["softwareupdate", "-i", "X"]) == 3

    @patch("secupdate.utils.shell.subprocess.run")
    def test_does_not_capture_output(self, mock_run: MagicMock) -> None:
        """run_interactive inherits the terminal."""
        mock_run.return_value = MagicMock(returncode=0)

        run_interactive(["echo", "hello"])

        kwargs = mock_run.call_args.kwargs
        assert "capture_output" not in kwargs
        assert "stdout" not in kwargs
        assert "stderr" not in kwargs


class TestCommandExists:
    """Tests for command_exists function."""

    def test_name_on_path(self) -> None:
        """Bare names are looked up on PATH."""
        with patch("secupdate.utils.shell.shutil.which", return_value="/usr/bin/pgrep"):
            assert command_exists("pgrep") is True

    def test_name_missing(self) -> None:
        """Unknown names are reported missing."""
        with patch("secupdate.utils.shell.shutil.which", return_value=None):
            assert command_exists("softwareupdate") is False

    def test_absolute_path(self, tmp_path: Path) -> None:
        """Absolute paths are checked directly."""
        tool = tmp_path / "softwareupdate"
        tool.write_text("")

        assert command_exists(str(tool)) is True
        assert command_exists(str(tmp_path / "missing")) is False
