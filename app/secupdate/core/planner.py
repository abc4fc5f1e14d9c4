"""Install plan construction."""

import logging

from secupdate.models.plan import InstallPlan, SafariDecision
from secupdate.models.update import CategoryBuckets, UpdateLabel

logger = logging.getLogger(__name__)


def build_plan(buckets: CategoryBuckets, decision: SafariDecision) -> InstallPlan:
    """Build the ordered install plan.

    XProtect updates come first, then MRTConfigData, then Safari when the
    gate admits it. A label found in more than one bucket is installed
    once, at its first position.

    Args:
        buckets: Classified updates.
        decision: Safari gate decision.

    Returns:
        InstallPlan with unique labels in install order.
    """
    candidates: list[UpdateLabel] = [*buckets.xprotect, *buckets.mrtconfigdata]
    if decision.admits_safari:
        candidates.extend(buckets.safari)

    labels = tuple(dict.fromkeys(candidates))
    if len(labels) < len(candidates):
        logger.debug("Dropped %d duplicate label(s) from plan", len(candidates) - len(labels))

    return InstallPlan(labels=labels, safari_decision=decision)
