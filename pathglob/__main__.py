"""Allow ``python -m pathglob``."""

import sys

from pathglob.cli import main

if __name__ == "__main__":
    sys.exit(main())
