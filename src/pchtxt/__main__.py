"""Allow ``python -m pchtxt``."""

import sys

from pchtxt.cli import main

if __name__ == "__main__":
    sys.exit(main())
