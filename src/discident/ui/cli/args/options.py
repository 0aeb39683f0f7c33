"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from discident.domain.features import FeatureSet


@final
@dataclass(slots=True)
class ReadArgs:
    """Command line arguments for the ``read`` subcommand."""

    command: Literal["read"]
    device: str | None
    features: FeatureSet
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ParseArgs:
    """Command line arguments for the ``parse`` subcommand."""

    command: Literal["parse"]
    toc: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class PutArgs:
    """Command line arguments for the ``put`` subcommand."""

    command: Literal["put"]
    first: int
    offsets: list[int]
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class FeaturesArgs:
    """Command line arguments for the ``features`` subcommand."""

    command: Literal["features"]
    verbose: bool
    quiet: bool


CLIArgs = ReadArgs | ParseArgs | PutArgs | FeaturesArgs

__all__ = ["CLIArgs", "FeaturesArgs", "ParseArgs", "PutArgs", "ReadArgs"]
