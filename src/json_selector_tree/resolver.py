"""Resolve selector paths against a JSON value.

Resolution walks the path one step at a time and stops at the first step that
does not apply: a missing key, an out-of-range index, or a step whose kind
does not match the current value. Not finding a value is an ordinary outcome,
so it is reported through the ``MISSING`` sentinel (or a caller-supplied
default) rather than an exception. ``MISSING`` is distinct from JSON ``null``,
which resolves to ``None``.

Example::

    doc = [False, {"bla": False, "blubb": True}, False]
    select(doc, [ArrayIndex(1), ObjectKey("blubb")])   # True
    select(doc, [ArrayIndex(7)])                       # MISSING
"""

from __future__ import annotations

from typing import Any, Final

from json_selector_tree.selector import ArrayIndex, ObjectKey, Selector, SelectorPath

__all__ = ["MISSING", "contains", "select", "select_one"]


class _MissingType:
    """Type of the ``MISSING`` sentinel. Falsy, with a stable repr."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Final = _MissingType()


def select_one(value: Any, selector: Selector, default: Any = MISSING) -> Any:
    """Select one layer into ``value``.

    Args:
        value:    The current JSON value.
        selector: The step to apply.
        default:  Returned when the step does not resolve.

    Returns:
        The child value stored in ``value`` (not a copy), or ``default``.
    """
    if isinstance(value, dict) and isinstance(selector, ObjectKey):
        return value.get(selector.key, default)
    if isinstance(value, list) and isinstance(selector, ArrayIndex):
        # Negative indices are out of range, not counted from the end.
        if 0 <= selector.index < len(value):
            return value[selector.index]
        return default
    return default


def select(root: Any, path: SelectorPath, default: Any = MISSING) -> Any:
    """Select the part of ``root`` addressed by ``path``.

    An empty path selects ``root`` itself. Resolution fails fast: the first
    step that does not resolve ends the walk and ``default`` is returned.
    """
    current = root
    for selector in path:
        current = select_one(current, selector, MISSING)
        if current is MISSING:
            return default
    return current


def contains(root: Any, path: SelectorPath) -> bool:
    """Return True if ``path`` resolves against ``root``."""
    return select(root, path) is not MISSING
