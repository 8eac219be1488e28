"""Entry point for running graphwalk as a module (python -m graphwalk)."""
import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
