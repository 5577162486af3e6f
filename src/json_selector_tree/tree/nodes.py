"""TreeNode: one labeled, navigable node of a display tree.

Produced by TreeBuilder and handed to a tree widget, which keeps all
expand/collapse/selection state on its side and treats nodes as read-only.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_selector_tree.errors import DuplicateSelectorError
from json_selector_tree.selector import Selector

__all__ = ["TreeNode"]


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in the display tree.

    A node is identified within its sibling group by its selector, never by
    its position, so a widget can remember it across rebuilds.

    Attributes:
        selector: The step that reaches this node from its parent.
        label:    Display text.  The selector text alone for containers;
                  ``"<selector><separator><scalar>"`` for leaves; the bare
                  scalar text for the node of a scalar root.
        children: Child nodes in source order.  Empty for leaves and for
                  empty containers.

    Raises:
        DuplicateSelectorError: If two children share a selector.
    """

    selector: Selector
    label: str
    children: tuple[TreeNode, ...] = ()

    def __post_init__(self) -> None:
        seen: set[Selector] = set()
        for child in self.children:
            if child.selector in seen:
                raise DuplicateSelectorError(child.selector)
            seen.add(child.selector)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def height(self) -> int:
        """Number of lines the subtree occupies when fully expanded."""
        return 1 + sum(child.height for child in self.children)

    def child(self, selector: Selector) -> TreeNode | None:
        """Return the child addressed by ``selector``, or None."""
        for child in self.children:
            if child.selector == selector:
                return child
        return None
