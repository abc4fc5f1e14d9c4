"""secupdate - background installer for XProtect, MRT and Safari updates."""

__version__ = "0.1.0"
