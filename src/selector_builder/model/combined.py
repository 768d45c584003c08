"""Combined selector: two rendered selectors joined by a combinator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CombinedSelector:
    """Two finished selectors joined by a combinator token.

    Both sides are stored already rendered, so the value never changes after
    construction. The combinator is always surrounded by exactly one space on
    each side, even when it is the descendant combinator ``" "`` itself.
    """

    left: str
    combinator: str
    right: str

    def render(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    stringify = render

    def __str__(self) -> str:
        return self.render()
