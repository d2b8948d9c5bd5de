"""Main entry point for estreewalk package."""

import sys


def main():
    """Main function for estreewalk."""
    from estreewalk.cli.main import cli

    try:
        return cli()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
