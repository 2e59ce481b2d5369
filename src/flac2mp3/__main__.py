"""Allow ``python -m flac2mp3``."""

import sys

from flac2mp3.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
