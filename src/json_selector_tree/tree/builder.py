"""TreeBuilder: converts any valid JSON value into a list of TreeNode.

Uses recursive dispatch over dicts, lists, and scalar values. Object members
are addressed by ObjectKey, array elements by ArrayIndex, both in source
order.

Root special cases:
- an empty object or array yields an empty list (no node for the container)
- a scalar yields one leaf addressed by ROOT, labeled with the scalar text

Below the root an empty container still yields a node with zero children.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from json_selector_tree.config import BuildConfig
from json_selector_tree.errors import NestingDepthError
from json_selector_tree.selector import ROOT, ArrayIndex, ObjectKey, Selector
from json_selector_tree.tree.nodes import TreeNode

__all__ = ["JsonValue", "TreeBuilder", "build_tree"]

logger = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into display TreeNodes.

    Scalar text is the compact JSON encoding of the value (``true``,
    ``null``, ``1.5``, ``"text"``), so string leaves show their quotes.

    Example::
        builder = TreeBuilder()
        builder.build({"name": "John", "tags": []})
        # [TreeNode(ObjectKey("name"), 'name: "John"'),
        #  TreeNode(ObjectKey("tags"), "tags")]
    """

    config: BuildConfig = field(default_factory=BuildConfig)

    def build(self, value: JsonValue) -> list[TreeNode]:
        """Convert a JSON value to its top-level TreeNodes.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            One node per member of a dict or list root; a single ROOT leaf for a
            scalar root.

        Raises:
            TypeError: If value, or anything nested in it, is not a JSON type.
            NestingDepthError: If ``config.max_depth`` is exceeded.
        """
        if isinstance(value, (dict, list)):
            return self._build_children(value, ())
        return [TreeNode(selector=ROOT, label=self._scalar_text(value))]

    def _build_children(
        self, container: dict[str, Any] | list[Any], path: tuple[Selector, ...]
    ) -> list[TreeNode]:
        if isinstance(container, dict):
            items = ((ObjectKey(key), val) for key, val in container.items())
        else:
            items = ((ArrayIndex(idx), val) for idx, val in enumerate(container))
        return [self._build_node(selector, val, path) for selector, val in items]

    def _build_node(
        self, selector: Selector, value: JsonValue, parent: tuple[Selector, ...]
    ) -> TreeNode:
        path = (*parent, selector)
        max_depth = self.config.max_depth
        if max_depth is not None and len(path) > max_depth:
            logger.debug("Rejecting document: depth %d exceeds %d", len(path), max_depth)
            raise NestingDepthError(path, max_depth)

        if isinstance(value, (dict, list)):
            children = self._build_children(value, path)
            return TreeNode(selector=selector, label=str(selector), children=tuple(children))

        text = self._scalar_text(value)
        return TreeNode(selector=selector, label=f"{selector}{self.config.separator}{text}")

    def _scalar_text(self, value: Any) -> str:
        if value is None or isinstance(value, (bool, str, int, float)):
            return json.dumps(value, ensure_ascii=self.config.ensure_ascii)
        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def build_tree(root: JsonValue, config: BuildConfig | None = None) -> list[TreeNode]:
    """Create the top-level TreeNodes for a JSON value.

    Creates a fresh ``TreeBuilder`` per call, so calls share no state.
    """
    return TreeBuilder(config=config or BuildConfig()).build(root)
