"""
nodes.py

Node model for picker datasets. A dataset is an ordered list of root
groups; each node may carry an ``items`` list of children. Raw data usually
arrives as JSON-like dicts and is coerced here once.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional


class TreeNode:
    """Represents a node in the picker tree (group, sub-group or item)."""

    def __init__(
        self,
        id: Any,
        name: str = "",
        description: Optional[str] = None,
        items: Optional[List["TreeNode"]] = None,
    ):
        self.id = id
        self.name = name or ""
        self.description = description
        # None when the source carried no items list at all
        self.items = items

    @property
    def children(self) -> List["TreeNode"]:
        return self.items or []

    @property
    def has_children(self) -> bool:
        return bool(self.items)

    def matches(self, term: str, description: bool = True) -> bool:
        """True if name, or description when enabled, contains ``term`` (already lower-cased)."""
        if term in self.name.lower():
            return True
        return description and bool(self.description) and term in str(self.description).lower()

    def with_items(self, items: Optional[List["TreeNode"]]) -> "TreeNode":
        """Return a shallow copy carrying a different children list."""
        return TreeNode(self.id, self.name, self.description, items)

    @classmethod
    def from_value(cls, value: Any) -> Optional["TreeNode"]:
        """
        Build a node from a mapping.

        Returns None for entries that cannot be addressed: ``None``, anything
        that is not a mapping, or a mapping without an ``id``.
        """
        if isinstance(value, TreeNode):
            return value
        if not isinstance(value, Mapping) or value.get("id") is None:
            return None

        raw_items = value.get("items")
        items = build_nodes(raw_items) if isinstance(raw_items, (list, tuple)) else None
        return cls(
            value["id"],
            name=value.get("name") or "",
            description=value.get("description"),
            items=items,
        )

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id!r}, name={self.name!r}, children={len(self.children)})"


def build_nodes(data: Optional[Iterable[Any]]) -> List[TreeNode]:
    """Convert raw dataset entries to nodes, skipping malformed ones."""
    nodes: List[TreeNode] = []
    for value in data or []:
        node = TreeNode.from_value(value)
        if node is not None:
            nodes.append(node)
    return nodes
