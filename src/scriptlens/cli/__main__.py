"""Main entry point for scriptlens CLI when run as a module."""

from scriptlens.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
