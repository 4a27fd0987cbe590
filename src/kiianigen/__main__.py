"""Main entry point for kiianigen."""

from kiianigen.cli.main import cli

if __name__ == "__main__":
    cli()
