"""Allow ``python -m emailmask``."""

import sys

from emailmask.cli import main

if __name__ == "__main__":
    sys.exit(main())
