"""Main entry point for midipump."""

from midipump.cli import cli

if __name__ == "__main__":
    cli()
