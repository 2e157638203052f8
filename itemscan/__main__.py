"""Allow ``python -m itemscan``."""

import sys

from itemscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
