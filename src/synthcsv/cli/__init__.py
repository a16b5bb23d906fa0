"""Command-line interface for synthcsv."""

from __future__ import annotations

from synthcsv.cli.main import cli

__all__ = ["cli"]
