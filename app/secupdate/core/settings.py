"""Updater settings and settings file I/O.

Settings are read from ~/.config/secupdate/config.toml. Every key is
optional; a missing default file yields the built-in defaults.

Example file::

    softwareupdate_path = "/usr/sbin/softwareupdate"
    install_timeout_seconds = 1800

    [application_patterns]
    Safari = ["Safari", "com.apple.Safari"]

    [colors]
    info = "#0ec1c8"
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from secupdate.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_PATTERNS: dict[str, list[str]] = {
    "Safari": ["Safari", "com.apple.Safari"],
}


class UpdaterSettings(BaseModel):
    """Settings for the external tools secupdate drives.

    Attributes:
        softwareupdate_path: Path to the softwareupdate executable.
        pgrep_path: Path to pgrep, used to find running processes.
        ps_path: Path to ps, used to name the processes pgrep found.
        list_timeout_seconds: Timeout for listing updates (None = wait forever).
        install_timeout_seconds: Timeout per install (None = wait forever).
        application_patterns: Command-line patterns identifying each application.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    softwareupdate_path: str = "/usr/sbin/softwareupdate"
    pgrep_path: str = "/usr/bin/pgrep"
    ps_path: str = "/bin/ps"
    list_timeout_seconds: Annotated[
        int | None,
        Field(ge=1, description="Timeout for softwareupdate -l"),
    ] = None
    install_timeout_seconds: Annotated[
        int | None,
        Field(ge=1, description="Timeout for each softwareupdate -i"),
    ] = None
    application_patterns: dict[str, list[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_APPLICATION_PATTERNS.items()}
    )

    def patterns_for(self, application: str) -> list[str]:
        """Return the process patterns for an application.

        Falls back to the application name itself when nothing is configured.
        """
        return self.application_patterns.get(application) or [application]


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when an explicitly requested settings file does not exist."""


class SettingsParseError(SettingsError):
    """Raised when the settings file is not valid TOML."""


def read_settings_file(path: Path) -> dict[str, Any]:
    """Read the raw TOML document from a settings file.

    Args:
        path: Path to the settings file.

    Returns:
        Parsed TOML document.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read.
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings file {path}: {e}") from e


def load_settings(path: Path | None = None) -> UpdaterSettings:
    """Load updater settings.

    Args:
        path: Explicit settings file. If None, the default path is used and
            a missing file simply means defaults.

    Returns:
        Validated UpdaterSettings.

    Raises:
        SettingsNotFoundError: If an explicit path does not exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_config_path()

    if not settings_path.exists():
        if path is not None:
            raise SettingsNotFoundError(f"Settings file not found: {settings_path}")
        logger.debug("No settings file at %s, using defaults", settings_path)
        return UpdaterSettings()

    data = read_settings_file(settings_path)
    # Theme colors share the file but are validated by the theme module
    data.pop("colors", None)

    try:
        return UpdaterSettings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
