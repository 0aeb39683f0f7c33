"""Command execution package for CLI."""

from discident.ui.cli.commands.disc import DiscCommand, ParseCommand, PutCommand, ReadCommand
from discident.ui.cli.commands.features import FeaturesCommand

__all__ = [
    "DiscCommand",
    "FeaturesCommand",
    "ParseCommand",
    "PutCommand",
    "ReadCommand",
]
