"""CLI commands for Fleeting.

This package provides the command-line interface: writing today's entry,
reading the timeline, and viewing writing statistics.
"""

from fleeting.cli.main import cli, main

__all__ = ["cli", "main"]
