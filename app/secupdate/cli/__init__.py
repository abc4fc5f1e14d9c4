"""CLI package for secupdate.

This package contains the Typer application.
"""

from secupdate.cli.main import app

__all__ = ["app"]
