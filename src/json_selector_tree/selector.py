"""Selector value types: one address step from a JSON value to a child value.

A selector path is an ordered sequence of these steps; the empty sequence
denotes the root itself. Three variants form a closed union:

- RootSelector -> the synthetic step of a tree built from a scalar root
- ObjectKey    -> a named member of a JSON object
- ArrayIndex   -> a positional member of a JSON array

Selectors are immutable, hashable and compare structurally. ``str()`` gives
the display text used as a tree label prefix. No validation happens at
construction time: a selector may name a key or index that does not resolve.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["ROOT", "ArrayIndex", "ObjectKey", "RootSelector", "Selector", "SelectorPath"]


@dataclass(frozen=True, slots=True)
class RootSelector:
    """The empty step. Its display text is the empty string."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class ObjectKey:
    """Addresses the member ``key`` of a JSON object."""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class ArrayIndex:
    """Addresses the element at position ``index`` of a JSON array."""

    index: int

    def __str__(self) -> str:
        return str(self.index)


ROOT = RootSelector()

Selector = RootSelector | ObjectKey | ArrayIndex
SelectorPath = Sequence[Selector]
