"""Unit tests for display helpers."""

from io import StringIO

import pytest
from rich.console import Console
from secupdate.cli import display
from secupdate.core.theme import get_rich_theme
from secupdate.models.plan import GateResult, InstallResult, SafariDecision
from secupdate.models.process import ProcessInfo
from secupdate.models.update import CategoryMatch, UpdateCategory


@pytest.fixture
def output(monkeypatch: pytest.MonkeyPatch) -> StringIO:
    """Capture everything printed through the shared console."""
    buffer = StringIO()
    test_console = Console(file=buffer, theme=get_rich_theme(), width=120, color_system=None, soft_wrap=True)
    monkeypatch.setattr(display, "console", test_console)
    monkeypatch.setattr("secupdate.utils.formatting.console", test_console)
    return buffer


class TestDisplay:
    """Tests for run output helpers."""

    def test_label_markup_is_escaped(self, output: StringIO) -> None:
        """Labels containing brackets are printed literally."""
        display.print_match(CategoryMatch(UpdateCategory.SAFARI, "Safari[beta]-1"))

        assert "Found Safari update: Safari[beta]-1" in output.getvalue()

    def test_empty_bucket_prints_nothing(self, output: StringIO) -> None:
        """An empty bucket produces no output."""
        display.print_bucket(UpdateCategory.XPROTECT, ())

        assert output.getvalue() == ""

    def test_bucket_lists_labels(self, output: StringIO) -> None:
        """A bucket is printed as a heading plus one line per label."""
        display.print_bucket(UpdateCategory.MRT_CONFIG_DATA, ("MRTConfigData-1.99",))

        assert "MRTConfigData updates to install:" in output.getvalue()
        assert "  - MRTConfigData-1.99" in output.getvalue()

    def test_gate_not_requested_is_silent(self, output: StringIO) -> None:
        """Nothing is printed when Safari was not considered."""
        display.print_gate_result(GateResult(decision=SafariDecision.NOT_REQUESTED))

        assert output.getvalue() == ""

    def test_gate_skipped(self, output: StringIO) -> None:
        """A skipped gate lists processes and explains the force flag."""
        display.print_gate_result(
            GateResult(
                decision=SafariDecision.SKIPPED,
                processes=(ProcessInfo(pid=501, command="Safari"),),
            )
        )

        text = output.getvalue()
        assert "PID: 501, Command: Safari" in text
        assert "Use the -f option" in text

    def test_install_results(self, output: StringIO) -> None:
        """Install outcomes are reported per label."""
        display.print_install_result(InstallResult(label="A", succeeded=True, returncode=0))
        display.print_install_result(InstallResult(label="B", succeeded=False, returncode=1))

        assert "Successfully installed: A" in output.getvalue()
        assert "Failed to install: B" in output.getvalue()

    def test_results_table(self) -> None:
        """The results table has one row per result."""
        table = display.create_results_table(
            [
                InstallResult(label="A", succeeded=True, returncode=0),
                InstallResult(label="B", succeeded=False, error="Installer exited with status 1"),
            ]
        )

        assert table.row_count == 2

    def test_gate_lookup_error(self, output: StringIO) -> None:
        """A failed Safari check is explained before the skip message."""
        display.print_gate_result(
            GateResult(decision=SafariDecision.SKIPPED, lookup_error="Failed to run pgrep")
        )

        text = output.getvalue()
        assert "Could not check whether Safari is running: Failed to run pgrep" in text
        assert "Safari updates will be skipped" in text
        assert "Safari processes detected" not in text
