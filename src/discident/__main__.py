"""Allow ``python -m discident``."""

import sys

from discident.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
