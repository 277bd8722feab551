"""
CLI layer for ulidkit.

Provides a Typer application for generating and validating ULIDs. All
identifier logic lives in ``ulidkit.core`` -- this package handles only
terminal transport: argument parsing, coloured output, and exit codes.

Entry point::

    ulidkit --help
"""

from ulidkit.cli.app import app

__all__ = ["app"]
