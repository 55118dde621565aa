"""Main entry point for scriptlayout CLI when run as a module."""

from scriptlayout.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
