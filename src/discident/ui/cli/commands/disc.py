"""src/discident/ui/cli/commands/disc.py
What: Commands that build a disc from a drive, a TOC string or an offsets array.
Why: Share display wiring while each command picks its own constructor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, final

from discident.features.disc import Disc
from discident.ui.cli.args.options import ParseArgs, PutArgs, ReadArgs
from discident.ui.cli.display.disc_info import DiscInfoDisplay

ArgsT = TypeVar("ArgsT", ReadArgs, ParseArgs, PutArgs)


class DiscCommand(ABC, Generic[ArgsT]):
    """Base class for commands producing a :class:`Disc`."""

    args: ArgsT
    display: DiscInfoDisplay

    def __init__(self, args: ArgsT) -> None:
        self.args = args
        self.display = DiscInfoDisplay()

    @abstractmethod
    def build_disc(self) -> Disc:
        """Create the disc this command reports on."""

    def execute(self) -> Disc:
        """Build the disc and display it.

        Raises:
            DiscError: If the disc could not be read or the TOC is invalid.
        """
        disc = self.build_disc()
        self.display.show_disc(disc, quiet=self.args.quiet)
        return disc


@final
class ReadCommand(DiscCommand[ReadArgs]):
    """Read a disc from a drive."""

    def build_disc(self) -> Disc:
        return Disc.read_features(self.args.device, self.args.features)


@final
class ParseCommand(DiscCommand[ParseArgs]):
    """Compute disc IDs from a TOC string."""

    def build_disc(self) -> Disc:
        return Disc.parse(self.args.toc)


@final
class PutCommand(DiscCommand[PutArgs]):
    """Compute disc IDs from the lead-out and track offsets."""

    def build_disc(self) -> Disc:
        return Disc.put(self.args.first, self.args.offsets)


__all__ = ["DiscCommand", "ParseCommand", "PutCommand", "ReadCommand"]
