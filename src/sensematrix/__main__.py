"""Main entry point for sensematrix."""

from sensematrix.cli.main import cli

if __name__ == "__main__":
    cli()
