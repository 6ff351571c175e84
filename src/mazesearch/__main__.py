"""Main entry point for the mazesearch package when run as a module.

This module enables running mazesearch directly using 'python -m mazesearch'.
"""

import sys

from . import cli


def main():
    """Main entry point for the package."""
    sys.exit(cli.main())


if __name__ == "__main__":
    main()
