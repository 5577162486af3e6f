"""Traversal helpers over built TreeNode lists.

Paths produced and accepted here follow ``select``: the ROOT node of a scalar
document is addressed by the empty path, and a ROOT step never resolves.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from json_selector_tree.selector import RootSelector, Selector, SelectorPath
from json_selector_tree.tree.nodes import TreeNode

__all__ = ["find_node", "walk"]


def walk(
    nodes: Iterable[TreeNode], parent: tuple[Selector, ...] = ()
) -> Iterator[tuple[tuple[Selector, ...], TreeNode]]:
    """Yield ``(path, node)`` pairs in depth-first pre-order.

    This is the row order of the tree when every node is expanded. ``path`` is
    the selector path from the document root to the node, suitable for
    ``select``; the ROOT node of a scalar document gets the empty path.
    """
    for node in nodes:
        if isinstance(node.selector, RootSelector):
            path = parent
        else:
            path = (*parent, node.selector)
        yield path, node
        yield from walk(node.children, path)


def find_node(nodes: Iterable[TreeNode], path: SelectorPath) -> TreeNode | None:
    """Return the node addressed by ``path``, or None.

    The empty path returns the ROOT node of a scalar document. For an object
    or array document it returns None: the root container has no node of its
    own.
    """
    top_level = list(nodes)
    if not path:
        if len(top_level) == 1 and isinstance(top_level[0].selector, RootSelector):
            return top_level[0]
        return None
    if any(isinstance(selector, RootSelector) for selector in path):
        return None

    first, *rest = path
    node = next((n for n in top_level if n.selector == first), None)
    for selector in rest:
        if node is None:
            return None
        node = node.child(selector)
    return node
