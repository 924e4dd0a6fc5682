"""Command line interface."""

from tagindex.cli.main import app

__all__ = ["app"]
