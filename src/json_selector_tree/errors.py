"""Exceptions raised by json-selector-tree.

Both subclass ValueError. A selector path that does not resolve is not an
error and has no exception here (see ``resolver.MISSING``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_selector_tree.selector import Selector

__all__ = ["DuplicateSelectorError", "NestingDepthError"]


class DuplicateSelectorError(ValueError):
    """Two sibling tree nodes share the same selector."""

    def __init__(self, selector: Selector) -> None:
        self.selector = selector
        msg = f"sibling nodes must have unique selectors, got duplicate {selector!r}"
        super().__init__(msg)


class NestingDepthError(ValueError):
    """A document nests deeper than ``BuildConfig.max_depth`` allows.

    Attributes:
        path:      Selector path of the first node beyond the limit.
        max_depth: The configured limit.
    """

    def __init__(self, path: tuple[Selector, ...], max_depth: int) -> None:
        self.path = path
        self.max_depth = max_depth
        msg = f"document nests deeper than max_depth={max_depth} at depth {len(path)}"
        super().__init__(msg)
