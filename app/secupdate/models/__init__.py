"""Data models for secupdate.

This module exports the core data structures used throughout the application.
"""

from secupdate.models.config import RunConfig
from secupdate.models.plan import GateResult, InstallPlan, InstallResult, SafariDecision
from secupdate.models.process import ProcessInfo
from secupdate.models.update import (
    CategoryBuckets,
    CategoryMatch,
    UpdateCatalog,
    UpdateCategory,
    UpdateLabel,
)

__all__ = [
    "CategoryBuckets",
    "CategoryMatch",
    "GateResult",
    "InstallPlan",
    "InstallResult",
    "ProcessInfo",
    "RunConfig",
    "SafariDecision",
    "UpdateCatalog",
    "UpdateCategory",
    "UpdateLabel",
]
