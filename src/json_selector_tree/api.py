"""Public API functions for json-selector-tree.

The two operations a display layer needs: ``select`` re-fetches the live
value at a remembered selector path, and ``build_tree`` produces the full
display structure. Both are pure and keep no state between calls.
"""

from __future__ import annotations

from json_selector_tree.resolver import MISSING, contains, select, select_one
from json_selector_tree.tree.builder import build_tree

__all__ = ["MISSING", "build_tree", "contains", "select", "select_one"]
