"""Allow running as ``python -m swift_style``."""

import sys

from swift_style.cli import main

if __name__ == "__main__":
    sys.exit(main())
