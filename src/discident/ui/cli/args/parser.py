"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from discident.config.config import Config
from discident.config.settings import DEFAULT_FEATURES
from discident.domain.features import FeatureSet
from discident.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from discident.ui.cli.args.options import CLIArgs, FeaturesArgs, ParseArgs, PutArgs, ReadArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        common = argparse.ArgumentParser(add_help=False)
        _ = common.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = common.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = common.add_argument(
            "--log-file",
            nargs="?",
            const=str(DEFAULT_LOG_FILE),
            default=None,
            metavar="LOG_FILE",
            help=f"Also write a debug log (default location: {DEFAULT_LOG_FILE})",
        )

        parser = argparse.ArgumentParser(
            description="discident - compute MusicBrainz and FreeDB disc IDs for audio CDs.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        subparsers = parser.add_subparsers(dest="command", required=True)

        read_parser = subparsers.add_parser(
            "read",
            parents=[common],
            help="Read the TOC (and optionally MCN/ISRCs) from a drive",
        )
        _ = read_parser.add_argument(
            "device",
            nargs="?",
            default=None,
            help="Drive to read; defaults to the configured or platform default",
            metavar="DEVICE",
        )
        _ = read_parser.add_argument(
            "--mcn",
            action="store_true",
            help="Also read the Media Catalogue Number",
        )
        _ = read_parser.add_argument(
            "--isrc",
            action="store_true",
            help="Also read per-track ISRCs",
        )
        _ = read_parser.add_argument(
            "--all",
            action="store_true",
            help="Read every supported feature",
        )

        parse_parser = subparsers.add_parser(
            "parse",
            parents=[common],
            help="Compute disc IDs from a TOC string",
        )
        _ = parse_parser.add_argument(
            "toc",
            nargs="+",
            help='TOC as "first last leadout offset...", quoted or as separate arguments',
            metavar="TOC",
        )

        put_parser = subparsers.add_parser(
            "put",
            parents=[common],
            help="Compute disc IDs from the lead-out and track offsets",
        )
        _ = put_parser.add_argument(
            "--first",
            type=int,
            default=1,
            help="Number of the first track (default 1)",
        )
        _ = put_parser.add_argument(
            "offsets",
            type=int,
            nargs="+",
            help="Total sectors followed by the start offset of every track",
            metavar="SECTORS",
        )

        _ = subparsers.add_parser(
            "features",
            parents=[common],
            help="Show the features libdiscid supports on this platform",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)
        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        log_file: Path | None = (
            Path(parsed_args.log_file) if parsed_args.log_file else configuration.log_file
        )
        _ = setup_logger(log_file=log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "read":
            return ArgumentParser._process_read(parsed_args)

        if command == "parse":
            return ParseArgs(
                command="parse",
                toc=" ".join(parsed_args.toc),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "put":
            return PutArgs(
                command="put",
                first=parsed_args.first,
                offsets=list(parsed_args.offsets),
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "features":
            return FeaturesArgs(command="features", verbose=is_verbose, quiet=is_quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_read(parsed_args: argparse.Namespace) -> ReadArgs:
        if parsed_args.all:
            features = FeatureSet.ALL
        elif parsed_args.mcn or parsed_args.isrc:
            features = FeatureSet.READ
            if parsed_args.mcn:
                features |= FeatureSet.MCN
            if parsed_args.isrc:
                features |= FeatureSet.ISRC
        else:
            features = DEFAULT_FEATURES

        return ReadArgs(
            command="read",
            device=parsed_args.device,
            features=features,
            verbose=bool(parsed_args.verbose),
            quiet=bool(parsed_args.quiet),
        )
