"""Update backends wrapping the operating system's update tooling.

This module exports the backend interface and its concrete implementations.
"""

from secupdate.backends.base import BackendError, UpdateBackend
from secupdate.backends.softwareupdate import SoftwareUpdateBackend

__all__ = ["BackendError", "SoftwareUpdateBackend", "UpdateBackend"]
