"""XDG-compliant path management for secupdate.

Only configuration lives on disk; secupdate keeps no state between runs.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "secupdate"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/secupdate/ (or XDG_CONFIG_HOME/secupdate/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default settings file path.

    Returns:
        Path to ~/.config/secupdate/config.toml.
    """
    return get_config_dir() / "config.toml"
