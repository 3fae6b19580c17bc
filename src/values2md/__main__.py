"""Module entry point for running with python -m values2md."""

import sys

from values2md.cli import main

if __name__ == "__main__":
    sys.exit(main())
