"""Per-label update installation.

Every label is installed with its own installer invocation. A failure is
recorded for that label only; the remaining labels are still attempted
and nothing is retried.
"""

import logging
import subprocess
from collections.abc import Callable, Iterable

from secupdate.backends.base import BackendError, UpdateBackend
from secupdate.models.plan import InstallResult
from secupdate.models.update import UpdateLabel

logger = logging.getLogger(__name__)


def install_label(backend: UpdateBackend, label: UpdateLabel) -> InstallResult:
    """Install a single label.

    Args:
        backend: Backend performing the installation.
        label: Update label to install.

    Returns:
        InstallResult describing the outcome.
    """
    try:
        returncode = backend.install_update(label)
    except subprocess.TimeoutExpired as e:
        logger.warning("Install of %s timed out after %ss", label, e.timeout)
        return InstallResult(label=label, succeeded=False, error=f"Timed out after {e.timeout}s")
    except (BackendError, OSError) as e:
        logger.warning("Install of %s could not run: %s", label, e)
        return InstallResult(label=label, succeeded=False, error=str(e))

    if returncode == 0:
        return InstallResult(label=label, succeeded=True, returncode=returncode)

    return InstallResult(
        label=label,
        succeeded=False,
        returncode=returncode,
        error=f"Installer exited with status {returncode}",
    )


def run_installs(
    backend: UpdateBackend,
    labels: Iterable[UpdateLabel],
    *,
    on_start: Callable[[UpdateLabel], None] | None = None,
    on_result: Callable[[InstallResult], None] | None = None,
) -> list[InstallResult]:
    """Install labels one after another.

    Args:
        backend: Backend performing the installations.
        labels: Labels in install order.
        on_start: Called with each label before it is installed.
        on_result: Called with each result as soon as it is known.

    Returns:
        One InstallResult per label, in install order.
    """
    results: list[InstallResult] = []
    for label in labels:
        if on_start is not None:
            on_start(label)
        result = install_label(backend, label)
        if on_result is not None:
            on_result(result)
        results.append(result)

    failed = sum(1 for r in results if r.failed)
    logger.info("Installed %d label(s), %d failed", len(results) - failed, failed)
    return results
