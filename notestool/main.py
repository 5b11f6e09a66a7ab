"""Application entry point."""

import sys

from notestool.ui.cli import start_application


def main():
    """Runs the application and exits with its status."""
    sys.exit(start_application())


if __name__ == "__main__":
    main()
