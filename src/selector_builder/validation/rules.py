"""Ordering and cardinality rules for compound selectors.

A compound selector is legal when its parts never go backwards in the
canonical order (element, id, class, attribute, pseudo-class,
pseudo-element) and element, id and pseudo-element each appear at most once.
Every legal chain is non-decreasing, so its last part is also its highest;
checking a request against the current (last) kind is enough.
"""

from __future__ import annotations

from enum import Enum

from selector_builder.model.kind import PartKind


class Verdict(Enum):
    """Outcome of asking for a part kind after the current one."""

    LEGAL = "ok"
    ORDER_VIOLATION = "order"
    CARDINALITY_VIOLATION = "once"


def check_transition(current: PartKind | None, requested: PartKind) -> Verdict:
    """Decide whether *requested* may follow *current*.

    ``current`` is None for an empty chain. The order check runs first, so a
    repeated single-occurrence kind that also goes backwards is reported as an
    order violation.
    """
    if current is None:
        return Verdict.LEGAL
    if requested.order < current.order:
        return Verdict.ORDER_VIOLATION
    if requested is current and requested.single_occurrence:
        return Verdict.CARDINALITY_VIOLATION
    return Verdict.LEGAL


# Rows are the current kind (None = empty chain), columns the requested kind.
TRANSITION_TABLE: dict[tuple[PartKind | None, PartKind], Verdict] = {
    (current, requested): check_transition(current, requested)
    for current in (None, *PartKind)
    for requested in PartKind
}
