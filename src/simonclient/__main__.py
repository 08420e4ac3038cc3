"""Allow running as ``python -m simonclient``."""

from simonclient.cli.main import cli

if __name__ == "__main__":
    cli()
