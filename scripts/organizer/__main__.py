"""Module entry point for running scripts.organizer as a package.

Allows: python -m scripts.organizer <command>
"""

from scripts.organizer.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
