"""Allows running as: python -m framer"""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
