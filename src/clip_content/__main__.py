"""Allow running as ``python -m clip_content``."""

import sys

from .cli import cli

if __name__ == "__main__":
    sys.exit(cli())
