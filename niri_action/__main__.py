"""Entry point for ``python -m niri_action``."""

import sys

from niri_action.cli.commands import main


if __name__ == "__main__":
    sys.exit(main())
