"""Command line interface package."""

from discident.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
