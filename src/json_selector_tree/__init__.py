"""JSON selector tree - selector paths and display trees for JSON documents."""

from __future__ import annotations

from json_selector_tree.api import (
    MISSING,
    build_tree,
    contains,
    select,
    select_one,
)
from json_selector_tree.cache import TreeCache
from json_selector_tree.config import BuildConfig
from json_selector_tree.errors import DuplicateSelectorError, NestingDepthError
from json_selector_tree.selector import (
    ROOT,
    ArrayIndex,
    ObjectKey,
    RootSelector,
    Selector,
    SelectorPath,
)
from json_selector_tree.tree import TreeBuilder, TreeNode, find_node, walk

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "ROOT",
    "ArrayIndex",
    "BuildConfig",
    "DuplicateSelectorError",
    "NestingDepthError",
    "ObjectKey",
    "RootSelector",
    "Selector",
    "SelectorPath",
    "TreeBuilder",
    "TreeCache",
    "TreeNode",
    "build_tree",
    "contains",
    "find_node",
    "select",
    "select_one",
    "walk",
]
