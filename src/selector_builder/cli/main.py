"""selector-builder CLI entry point: Click group with subcommands."""

import click

from selector_builder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-builder")
def cli() -> None:
    """selector-builder - assemble CSS selectors from ordered parts."""


# Import and register subcommands
from selector_builder.cli.build import build  # noqa: E402
from selector_builder.cli.rules import rules  # noqa: E402

cli.add_command(build)
cli.add_command(rules)
