"""Allow running as `python -m biodata`."""

from biodata.cli import cli

cli()
