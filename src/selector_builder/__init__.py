"""Fluent builder for CSS compound and complex selectors."""

__version__ = "0.1.0"

from selector_builder.model import (  # noqa: E402
    Combinator,
    CombinedSelector,
    PartKind,
    Renderable,
    SelectorFragment,
)
from selector_builder.builder import SelectorBuilder, css_selector_builder  # noqa: E402
from selector_builder.config import BuilderConfig  # noqa: E402
from selector_builder.errors import (  # noqa: E402
    CardinalityViolation,
    CombinatorError,
    OrderViolation,
    SelectorError,
)

__all__ = [
    "__version__",
    "BuilderConfig",
    "CardinalityViolation",
    "Combinator",
    "CombinatorError",
    "CombinedSelector",
    "OrderViolation",
    "PartKind",
    "Renderable",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFragment",
    "css_selector_builder",
]
