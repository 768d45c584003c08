"""Transition validator: turns rule verdicts into errors."""

from __future__ import annotations

from selector_builder.errors import CardinalityViolation, OrderViolation
from selector_builder.model.kind import PartKind
from selector_builder.validation.rules import TRANSITION_TABLE, Verdict


def validate_transition(current: PartKind | None, requested: PartKind) -> None:
    """Raise if *requested* may not follow *current*.

    Raises:
        OrderViolation: *requested* sorts before *current*.
        CardinalityViolation: *requested* is a repeated element, id or
            pseudo-element.
    """
    verdict = TRANSITION_TABLE[(current, requested)]
    if verdict is Verdict.ORDER_VIOLATION:
        raise OrderViolation(current=current, requested=requested)
    if verdict is Verdict.CARDINALITY_VIOLATION:
        raise CardinalityViolation(current=current, requested=requested)
