"""Selector model layer -- public type re-exports."""

from selector_builder.model.base import Renderable
from selector_builder.model.combined import CombinedSelector
from selector_builder.model.fragment import SelectorFragment
from selector_builder.model.kind import Combinator, PartKind

__all__ = [
    # kind
    "PartKind",
    "Combinator",
    # chain
    "SelectorFragment",
    "CombinedSelector",
    "Renderable",
]
