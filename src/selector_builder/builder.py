"""Selector builder entry point."""
from __future__ import annotations

import logging

from selector_builder.config import BuilderConfig
from selector_builder.errors import CombinatorError
from selector_builder.model.base import Renderable
from selector_builder.model.combined import CombinedSelector
from selector_builder.model.fragment import SelectorFragment
from selector_builder.model.kind import Combinator, PartKind

_STANDARD_TOKENS = Combinator.tokens()


class SelectorBuilder:
    """Starts selector chains and joins finished selectors with combinators.

    Example::

        builder = SelectorBuilder()
        builder.combine(
            builder.element("div").id("main").class_("container"),
            "+",
            builder.element("table").id("data"),
        ).render()
        # 'div#main.container + table#data'
    """

    def __init__(
        self,
        config: BuilderConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self._log = logger or logging.getLogger("selector_builder")
        self._root = SelectorFragment()

    @property
    def root(self) -> SelectorFragment:
        """The empty chain every new selector starts from."""
        return self._root

    def element(self, value: str) -> SelectorFragment:
        return self._root.element(value)

    def id(self, value: str) -> SelectorFragment:
        return self._root.id(value)

    def class_(self, value: str) -> SelectorFragment:
        return self._root.class_(value)

    def attr(self, value: str) -> SelectorFragment:
        return self._root.attr(value)

    def pseudo_class(self, value: str) -> SelectorFragment:
        return self._root.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorFragment:
        return self._root.pseudo_element(value)

    def compound(self, parts: list[tuple[PartKind, str]]) -> SelectorFragment:
        """Build one compound selector from ``(kind, value)`` pairs in order."""
        fragment = self._root
        for kind, value in parts:
            fragment = fragment.add(kind, value)
        return fragment

    def combine(
        self,
        left: Renderable,
        combinator: Combinator | str,
        right: Renderable,
    ) -> CombinedSelector:
        """Join two finished selectors with *combinator*.

        Any string is accepted as the combinator unless the builder was
        configured with ``strict_combinators=True``.
        """
        token = combinator.value if isinstance(combinator, Combinator) else combinator
        if token not in _STANDARD_TOKENS:
            if self.config.strict_combinators:
                raise CombinatorError(token)
            self._log.debug("Using non-standard combinator %r verbatim", token)
        return CombinedSelector(left=left.render(), combinator=token, right=right.render())


css_selector_builder = SelectorBuilder()
