"""Command line interface for flac2mp3."""

import signal
import sys
from types import FrameType
from typing import final

from flac2mp3.platform.logging import logger
from flac2mp3.ui.cli.args import ArgumentParser, ConvertArgs
from flac2mp3.ui.cli.commands import ConvertCommand

EXIT_INTERRUPTED = 130
EXIT_TERMINATED = 143
# sysexits EX_SOFTWARE; status 1 stays reserved for usage errors.
EXIT_INTERNAL_ERROR = 70


def _exit_on_sigterm(signum: int, frame: FrameType | None) -> None:
    """Turn SIGTERM into SystemExit so scratch cleanup runs."""
    del signum, frame
    sys.exit(EXIT_TERMINATED)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run the conversion.

        Per-file failures are logged and never change the exit status.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: ConvertArgs = ArgumentParser.process_args(args_list)
            _ = signal.signal(signal.SIGTERM, _exit_on_sigterm)
            _ = ConvertCommand(args).execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(EXIT_INTERRUPTED)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(EXIT_INTERNAL_ERROR)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Usage errors, interrupts and
        unexpected failures exit through ``sys.exit`` instead.
    """
    CommandProcessor.process_command()
    return 0
