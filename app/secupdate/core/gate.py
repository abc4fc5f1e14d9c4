"""Safari safety gate.

Safari updates are withheld while Safari is running unless forced.
XProtect-family updates are never gated.
"""

import logging

from secupdate.backends.base import BackendError, UpdateBackend
from secupdate.models.config import RunConfig
from secupdate.models.plan import GateResult, SafariDecision
from secupdate.models.update import CategoryBuckets

logger = logging.getLogger(__name__)

SAFARI_APPLICATION = "Safari"


def decide_safari(running: bool, force: bool) -> SafariDecision:
    """Apply the Safari decision table.

    Args:
        running: Whether Safari is currently running.
        force: Whether the force flag was given.

    Returns:
        NOT_RUNNING, FORCED, or SKIPPED.
    """
    if not running:
        return SafariDecision.NOT_RUNNING
    if force:
        return SafariDecision.FORCED
    return SafariDecision.SKIPPED


def evaluate_safari_gate(
    buckets: CategoryBuckets,
    config: RunConfig,
    backend: UpdateBackend,
) -> GateResult:
    """Decide whether the Safari bucket may be installed.

    The process table is only consulted when Safari updates were requested
    and at least one was found. If the search itself fails, Safari is
    assumed to be running.

    Args:
        buckets: Classified updates.
        config: Run configuration.
        backend: Backend used to search for Safari processes.

    Returns:
        GateResult with the decision and any Safari processes found.
    """
    if not config.install_safari or not buckets.safari:
        return GateResult(decision=SafariDecision.NOT_REQUESTED)

    try:
        processes = tuple(backend.find_application_processes(SAFARI_APPLICATION))
    except BackendError as e:
        # Unknown state is handled like a running Safari
        logger.warning("Could not check whether Safari is running: %s", e)
        decision = decide_safari(running=True, force=config.force_safari)
        return GateResult(decision=decision, lookup_error=str(e))

    decision = decide_safari(running=bool(processes), force=config.force_safari)

    logger.debug(
        "Safari gate: %d process(es) found, force=%s -> %s",
        len(processes),
        config.force_safari,
        decision.value,
    )
    return GateResult(decision=decision, processes=processes)
