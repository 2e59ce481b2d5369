"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, final, override

from flac2mp3 import __version__
from flac2mp3.config.config import Config
from flac2mp3.platform.logging import level_for_flags, setup_logger
from flac2mp3.ui.cli.args.options import ConvertArgs

USAGE_ERROR_EXIT_CODE = 1


class _UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    @override
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(USAGE_ERROR_EXIT_CODE, f"{self.prog}: error: {message}\n")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = _UsageErrorParser(
            prog="flac2mp3",
            description=(
                "Convert FLAC files to tagged MP3 files under "
                "<artist>/<album>/<NNN>_<title>.mp3 in the current directory, "
                "appending each result to playlist.m3u."
            ),
            epilog=(
                "Without -p, NUL-separated source paths are read from standard input, e.g.\n"
                "  find ~/music -name '*.flac' -print0 | flac2mp3"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-v",
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        _ = parser.add_argument(
            "-p",
            "--playlist",
            type=str,
            metavar="FILE",
            help="Convert the .flac entries of an M3U playlist instead of reading stdin",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ConvertArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            ConvertArgs: Processed command line arguments.

        Raises:
            SystemExit: With status 0 for -h/-v, 1 for usage errors.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        config = Config.load()
        _ = setup_logger(
            console_level=level_for_flags(verbose=parsed_args.verbose, quiet=parsed_args.quiet),
            log_file=config.log_file,
        )

        playlist = Path(parsed_args.playlist) if parsed_args.playlist else None
        if playlist is not None and not playlist.is_file():
            parser.error(f"playlist not found: {playlist}")

        return ConvertArgs(
            playlist=playlist,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            config=config,
        )


__all__ = ["ArgumentParser", "USAGE_ERROR_EXIT_CODE"]
