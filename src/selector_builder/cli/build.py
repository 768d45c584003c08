"""CLI command: selector-builder build -- assemble a selector from parts."""

from __future__ import annotations

import logging
import sys

import click

from selector_builder.builder import SelectorBuilder
from selector_builder.config import BuilderConfig
from selector_builder.errors import SelectorError
from selector_builder.model.base import Renderable
from selector_builder.model.kind import Combinator, PartKind

logger = logging.getLogger("selector_builder")

COMBINATOR_NAMES = {
    "descendant": Combinator.DESCENDANT.value,
    "child": Combinator.CHILD.value,
    "adjacent": Combinator.ADJACENT_SIBLING.value,
    "sibling": Combinator.GENERAL_SIBLING.value,
}

Compound = list[tuple[PartKind, str]]


def _parse_part(token: str) -> tuple[PartKind, str]:
    name, _, value = token.partition("=")
    try:
        return PartKind.from_name(name), value
    except KeyError:
        raise click.UsageError(f"Unknown selector part kind: {name!r}") from None


def group_tokens(tokens: tuple[str, ...]) -> tuple[list[Compound], list[str]]:
    """Split CLI tokens into compounds and the combinators between them.

    ``kind=value`` tokens are parts; anything else is a combinator, either a
    name from :data:`COMBINATOR_NAMES` or a literal token used verbatim.
    """
    if not tokens:
        raise click.UsageError("No selector parts given.")

    compounds: list[Compound] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if "=" in token:
            compounds[-1].append(_parse_part(token))
            continue
        if not compounds[-1]:
            raise click.UsageError(f"Combinator {token!r} must follow a selector part.")
        combinators.append(COMBINATOR_NAMES.get(token.lower(), token))
        compounds.append([])

    if not compounds[-1]:
        raise click.UsageError("Selector must not end with a combinator.")
    return compounds, combinators


@click.command()
@click.argument("tokens", nargs=-1)
@click.option("--strict", is_flag=True, help="Reject non-standard combinators")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def build(tokens: tuple[str, ...], strict: bool, verbose: bool) -> None:
    """Assemble a selector from kind=value parts and combinators.

    Consecutive parts form one compound selector; combinators join compounds
    from right to left, for example:

        selector-builder build element=div id=main + element=table ~ element=tr
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        logger.setLevel(logging.DEBUG)

    compounds, combinators = group_tokens(tokens)
    builder = SelectorBuilder(config=BuilderConfig(strict_combinators=strict))

    try:
        built: list[Renderable] = [builder.compound(parts) for parts in compounds]
        for fragment in built:
            logger.debug("Assembled compound %r", fragment.render())

        result = built[-1]
        for left, token in zip(reversed(built[:-1]), reversed(combinators)):
            result = builder.combine(left, token, result)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.render())
