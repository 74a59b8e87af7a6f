"""Command line interface for config audits."""

from .audit import cli

__all__ = ["cli"]
