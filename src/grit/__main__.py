"""Allow ``python -m grit``."""

from grit.cli import cli

cli()
