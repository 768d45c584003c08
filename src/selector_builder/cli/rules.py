"""CLI command: selector-builder rules -- print the part transition table."""

from __future__ import annotations

import click

from selector_builder.model.kind import PartKind
from selector_builder.validation.rules import TRANSITION_TABLE


@click.command()
def rules() -> None:
    """Show which part kinds may follow which.

    Rows are the last part added (``(start)`` for an empty chain), columns the
    part requested next. ``ok`` is legal, ``order`` breaks the canonical order,
    ``once`` repeats a single-occurrence part.
    """
    width = max(len(kind.label) for kind in PartKind) + 2
    header = "".ljust(width) + "".join(kind.label.ljust(width) for kind in PartKind)
    click.echo(header.rstrip())
    for current in (None, *PartKind):
        row = (current.label if current else "(start)").ljust(width)
        row += "".join(
            TRANSITION_TABLE[(current, requested)].value.ljust(width)
            for requested in PartKind
        )
        click.echo(row.rstrip())
