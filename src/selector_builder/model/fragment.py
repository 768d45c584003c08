"""Selector fragment: one immutable step of a compound selector chain."""

from __future__ import annotations

from dataclasses import dataclass, field

from selector_builder.model.kind import PartKind
from selector_builder.validation.validator import validate_transition


@dataclass(frozen=True)
class SelectorFragment:
    """A compound selector built up one part at a time.

    Each fragment holds the fully rendered text of everything before it
    (``prefix``) plus its own part. Adding a part validates the request
    against this fragment's kind and returns a new fragment; the receiver is
    never modified, so several chains may safely grow from a shared prefix.

    The root fragment (``kind=None``) stands for the empty chain and renders
    as an empty string. ``SelectorFragment()`` is the only construction meant
    for callers; the ``kind``/``value``/``prefix`` arguments are filled in by
    the part methods and are not checked against the ordering rules, so grow
    chains through ``element()``, ``id()`` and friends (or
    :class:`~selector_builder.builder.SelectorBuilder`) rather than passing
    them directly.
    """

    kind: PartKind | None = None
    value: str = ""
    prefix: str = ""
    rendered: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        own = self.kind.render(self.value) if self.kind is not None else ""
        object.__setattr__(self, "rendered", self.prefix + own)

    def render(self) -> str:
        return self.rendered

    stringify = render

    def __str__(self) -> str:
        return self.rendered

    # -- adding parts -----------------------------------------------------

    def element(self, value: str) -> SelectorFragment:
        return self._extend(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorFragment:
        return self._extend(PartKind.ID, value)

    def class_(self, value: str) -> SelectorFragment:
        return self._extend(PartKind.CLASS, value)

    def attr(self, value: str) -> SelectorFragment:
        return self._extend(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return self._extend(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return self._extend(PartKind.PSEUDO_ELEMENT, value)

    def add(self, kind: PartKind, value: str) -> SelectorFragment:
        """Add a part of any *kind*; same rules as the named methods."""
        return self._extend(kind, value)

    def _extend(self, kind: PartKind, value: str) -> SelectorFragment:
        validate_transition(self.kind, kind)
        return SelectorFragment(kind=kind, value=value, prefix=self.rendered)
