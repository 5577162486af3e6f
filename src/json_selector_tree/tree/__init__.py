"""Tree subpackage for JSON-to-display-tree conversion.

Re-exports the public API for the tree module:
- TreeNode: frozen dataclass representing a labeled node of the display tree
- TreeBuilder: converts any valid JSON value into a list of TreeNode
- build_tree: functional entry point around TreeBuilder
- walk / find_node: traversal helpers over built trees
"""

from json_selector_tree.tree.builder import JsonValue, TreeBuilder, build_tree
from json_selector_tree.tree.nodes import TreeNode
from json_selector_tree.tree.walk import find_node, walk

__all__ = ["JsonValue", "TreeBuilder", "TreeNode", "build_tree", "find_node", "walk"]
