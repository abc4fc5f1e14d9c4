"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable

import pytest
from secupdate.backends.base import UpdateBackend
from secupdate.models.process import ProcessInfo
from secupdate.utils.shell import CommandResult


class FakeBackend(UpdateBackend):
    """In-memory backend recording every call made to it.

    Attributes:
        catalog_text: Text returned by list_updates().
        list_returncode: Exit status returned by list_updates().
        install_codes: Exit status per label (default 0).
        processes: Processes returned per search pattern.
        available: Value returned by is_available().
        process_error: Raised by find_processes() when set.
    """

    def __init__(
        self,
        catalog_text: str = "",
        list_returncode: int = 0,
        install_codes: dict[str, int] | None = None,
        processes: dict[str, list[ProcessInfo]] | None = None,
        available: bool = True,
        process_error: Exception | None = None,
    ) -> None:
        self.catalog_text = catalog_text
        self.list_returncode = list_returncode
        self.install_codes = install_codes or {}
        self.processes = processes or {}
        self.available = available
        self.process_error = process_error
        self.list_calls = 0
        self.installed: list[str] = []
        self.process_queries: list[str] = []

    def is_available(self) -> bool:
        return self.available

    def list_updates(self) -> CommandResult:
        self.list_calls += 1
        return CommandResult(stdout=self.catalog_text, stderr="", returncode=self.list_returncode)

    def install_update(self, label: str) -> int:
        self.installed.append(label)
        return self.install_codes.get(label, 0)

    def application_patterns(self, application: str) -> list[str]:
        if application == "Safari":
            return ["Safari", "com.apple.Safari"]
        return [application]

    def find_processes(self, pattern: str) -> list[ProcessInfo]:
        self.process_queries.append(pattern)
        if self.process_error is not None:
            raise self.process_error
        return list(self.processes.get(pattern, []))


@pytest.fixture
def make_backend() -> Callable[..., FakeBackend]:
    """Factory for FakeBackend instances."""
    return FakeBackend


@pytest.fixture
def safari_processes() -> dict[str, list[ProcessInfo]]:
    """Process search results for a running Safari."""
    return {
        "Safari": [ProcessInfo(pid=501, command="/Applications/Safari.app/Contents/MacOS/Safari")],
        "com.apple.Safari": [
            ProcessInfo(pid=501, command="/Applications/Safari.app/Contents/MacOS/Safari"),
            ProcessInfo(pid=777, command="com.apple.Safari.SafeBrowsing.Service"),
        ],
    }


@pytest.fixture
def mock_catalog_output() -> str:
    """Sample softwareupdate -l --include-config-data output."""
    return """Software Update Tool

Finding available software
Software Update found the following new or updated software:
* Label: XProtectPlistConfigData-2024.01
\tTitle: XProtectPlistConfigData, Version: 2024.01, Size: 1234KiB, Recommended: YES,
* Label: MRTConfigData-1.99
\tTitle: MRTConfigData, Version: 1.99, Size: 5120KiB, Recommended: YES,
* Label: SafariTechnologyPreview-18
\tTitle: Safari Technology Preview, Version: 18, Size: 154416KiB, Recommended: YES,
* Label: macOS Sonoma 14.5-23F79
\tTitle: macOS Sonoma 14.5, Version: 14.5, Size: 1048576KiB, Recommended: YES, Action: restart,
"""


@pytest.fixture
def mock_no_updates_output() -> str:
    """softwareupdate -l output when nothing is available."""
    return """Software Update Tool

Finding available software
No new software available.
"""


@pytest.fixture
def mock_mixed_format_output() -> str:
    """Catalog output mixing marker, indentation and case variants."""
    return """Software Update found the following new or updated software:
   * Label: XProtectPayloads_10_15-130
   Label: MRTConfigData_10_14-1.93
*   LABEL:   Safari17.5VenturaAuto-17.5   
\tTitle: Safari, Version: 17.5, Size: 154416KiB,
  * Title: Label: is not at the start here
   Label:
"""
