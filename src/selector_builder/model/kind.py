"""Selector part kinds and combinator tokens."""

from __future__ import annotations

from enum import Enum


class PartKind(Enum):
    """The kind of one simple selector inside a compound selector.

    The enum value is the part's position in the canonical order:

        element < id < class < attribute < pseudo-class < pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def order(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name, as used in error messages."""
        return self.name.lower().replace("_", "-")

    @property
    def single_occurrence(self) -> bool:
        """True for kinds that may appear at most once per compound."""
        return self in _SINGLE_OCCURRENCE

    def render(self, value: str) -> str:
        """Render *value* with this kind's punctuation, e.g. ``#main``."""
        opening, closing = _AFFIXES[self]
        return f"{opening}{value}{closing}"

    @classmethod
    def from_name(cls, name: str) -> PartKind:
        """Resolve a CLI-style name such as ``attr`` or ``pseudo-class``.

        Raises KeyError for unknown names.
        """
        return _NAMES[name.strip().lower().replace("_", "-")]


_SINGLE_OCCURRENCE = frozenset({
    PartKind.ELEMENT,
    PartKind.ID,
    PartKind.PSEUDO_ELEMENT,
})

_AFFIXES: dict[PartKind, tuple[str, str]] = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

_NAMES: dict[str, PartKind] = {kind.label: kind for kind in PartKind}
_NAMES["attr"] = PartKind.ATTRIBUTE


class Combinator(Enum):
    """The four standard CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def tokens(cls) -> frozenset[str]:
        return frozenset(c.value for c in cls)
