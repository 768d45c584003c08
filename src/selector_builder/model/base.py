"""Base protocol for anything that renders to a selector string."""

from __future__ import annotations

from typing import Protocol


class Renderable(Protocol):
    """A selector fragment or combined selector."""

    def render(self) -> str: ...
