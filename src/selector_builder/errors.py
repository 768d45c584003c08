"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model.kind import PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
CARDINALITY_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    def __init__(
        self,
        message: str,
        *,
        current: PartKind | None = None,
        requested: PartKind | None = None,
    ) -> None:
        super().__init__(message)
        self.current = current
        self.requested = requested


class OrderViolation(SelectorError):
    """A part was requested after a part that must come later."""

    def __init__(self, message: str = ORDER_MESSAGE, **kwargs: PartKind | None) -> None:
        super().__init__(message, **kwargs)


class CardinalityViolation(SelectorError):
    """Element, id or pseudo-element was requested a second time."""

    def __init__(
        self, message: str = CARDINALITY_MESSAGE, **kwargs: PartKind | None
    ) -> None:
        super().__init__(message, **kwargs)


class CombinatorError(SelectorError):
    """A non-standard combinator was passed while strict mode is on."""

    def __init__(self, combinator: str) -> None:
        super().__init__(
            f"Unknown combinator {combinator!r}; expected one of ' ', '>', '+', '~'"
        )
        self.combinator = combinator

    def __reduce__(self):
        return (type(self), (self.combinator,))
