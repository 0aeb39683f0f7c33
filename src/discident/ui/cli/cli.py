"""Command line interface for discident."""

import sys
from typing import final

from discident.domain.errors import DiscError
from discident.platform.libdiscid import LibraryNotFoundError
from discident.platform.logging import logger
from discident.ui.cli.args import ArgumentParser
from discident.ui.cli.args.options import CLIArgs, FeaturesArgs, ParseArgs, PutArgs, ReadArgs
from discident.ui.cli.commands import FeaturesCommand, ParseCommand, PutCommand, ReadCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ReadArgs):
                _ = ReadCommand(args).execute()
            elif isinstance(args, ParseArgs):
                _ = ParseCommand(args).execute()
            elif isinstance(args, PutArgs):
                _ = PutCommand(args).execute()
            else:
                assert isinstance(args, FeaturesArgs)
                _ = FeaturesCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except DiscError as e:
            logger.error("%s", e)
            sys.exit(1)
        except LibraryNotFoundError as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures call ``sys.exit(...)``
        from the command processor instead of returning.
    """
    CommandProcessor.process_command()
    return 0
