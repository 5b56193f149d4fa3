"""Command-line interface."""
import sys

from starpad.main import main

if __name__ == "__main__":
    sys.exit(main())
