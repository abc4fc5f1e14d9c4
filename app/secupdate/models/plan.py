"""Install planning and result models.

This module defines the Safari safety decision, the ordered install plan,
and the per-label install outcome.
"""

from dataclasses import dataclass, field
from enum import Enum

from secupdate.models.process import ProcessInfo
from secupdate.models.update import UpdateLabel


class SafariDecision(Enum):
    """Outcome of the Safari safety gate.

    Attributes:
        NOT_REQUESTED: Safari updates disabled or none available.
        NOT_RUNNING: Safari is not running; updates will be installed.
        FORCED: Safari is running but the force flag admits the updates.
        SKIPPED: Safari is running; updates are withheld for this run.
    """

    NOT_REQUESTED = "not_requested"
    NOT_RUNNING = "not_running"
    FORCED = "forced"
    SKIPPED = "skipped"

    @property
    def admits_safari(self) -> bool:
        """Check if Safari updates go into the install plan."""
        return self in (SafariDecision.NOT_RUNNING, SafariDecision.FORCED)


@dataclass(frozen=True, slots=True)
class GateResult:
    """Safari safety gate decision with diagnostics.

    Attributes:
        decision: Whether the Safari bucket is admitted.
        processes: Safari processes found (empty unless Safari is running).
        lookup_error: Why the process search failed, if it did. A failed
            search is treated as Safari running.
    """

    decision: SafariDecision
    processes: tuple[ProcessInfo, ...] = field(default=())
    lookup_error: str | None = None


@dataclass(frozen=True, slots=True)
class InstallPlan:
    """Labels to install, in install order.

    Attributes:
        labels: Unique labels: XProtect, then MRTConfigData, then Safari.
        safari_decision: Gate decision that produced this plan.
    """

    labels: tuple[UpdateLabel, ...]
    safari_decision: SafariDecision = SafariDecision.NOT_REQUESTED

    @property
    def is_empty(self) -> bool:
        """Check if there is nothing to install."""
        return not self.labels

    def __len__(self) -> int:
        return len(self.labels)


@dataclass(frozen=True, slots=True)
class InstallResult:
    """Result of installing one label.

    Attributes:
        label: The label passed to the installer.
        succeeded: Whether the installer exited with status zero.
        returncode: Installer exit code, or None if it never ran to completion.
        error: Optional error message for failed installs.
    """

    label: UpdateLabel
    succeeded: bool
    returncode: int | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the install failed."""
        return not self.succeeded
