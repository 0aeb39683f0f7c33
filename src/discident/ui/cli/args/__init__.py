"""Command line argument handling package."""

from discident.ui.cli.args.options import CLIArgs, FeaturesArgs, ParseArgs, PutArgs, ReadArgs
from discident.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "FeaturesArgs", "ParseArgs", "PutArgs", "ReadArgs"]
