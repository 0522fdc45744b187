"""
shape.py

Classifies a dataset as two-level (group -> item) or three-level
(group -> sub-group -> item) once, and wraps it in the matching tree class.
Everything downstream works off ``SelectionTree.depth`` instead of
re-inspecting node shapes.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator, List, Optional

from treepicker.config.const import DEFAULT_ID_PREFIX
from treepicker.identity import NodePath
from treepicker.nodes import TreeNode, build_nodes


class TreeShape(Enum):
    TWO_LEVEL = 2
    THREE_LEVEL = 3


def detect_shape(dataset: Optional[Iterable[Any]]) -> TreeShape:
    """
    Look at the first group's first child: if it carries an ``items`` list
    the dataset is three levels deep, otherwise two. Empty datasets are
    two-level. Mixed depths are not supported.
    """
    roots = build_nodes(dataset)
    if not roots or not roots[0].children:
        return TreeShape.TWO_LEVEL
    if roots[0].children[0].items is not None:
        return TreeShape.THREE_LEVEL
    return TreeShape.TWO_LEVEL


class SelectionTree:
    """A dataset bound to an id prefix, with its depth fixed at construction."""

    shape: TreeShape
    depth: int

    def __init__(self, roots: List[TreeNode], prefix: str = DEFAULT_ID_PREFIX):
        self.roots = roots
        self.prefix = prefix

    @property
    def base_path(self) -> NodePath:
        return NodePath(self.prefix)

    @property
    def is_empty(self) -> bool:
        return not self.roots

    def derive(self, roots: List[TreeNode]) -> "SelectionTree":
        """Same shape and prefix, different roots (used for filtered views)."""
        return type(self)(roots, self.prefix)

    def find(self, path: NodePath) -> Optional[TreeNode]:
        """Locate the node at ``path``; None if it is not in this tree."""
        if path.prefix != self.prefix or not path.path or path.depth > self.depth:
            return None
        level = self.roots
        node = None
        for raw_id in path.path:
            node = next((n for n in level if str(n.id) == raw_id), None)
            if node is None:
                return None
            level = node.children
        return node

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(prefix={self.prefix!r}, roots={len(self.roots)})"


class TwoLevelTree(SelectionTree):
    shape = TreeShape.TWO_LEVEL
    depth = 2


class ThreeLevelTree(SelectionTree):
    shape = TreeShape.THREE_LEVEL
    depth = 3


_TREE_CLASSES = {
    TreeShape.TWO_LEVEL: TwoLevelTree,
    TreeShape.THREE_LEVEL: ThreeLevelTree,
}


def build_tree(dataset: Optional[Iterable[Any]], prefix: str = DEFAULT_ID_PREFIX) -> SelectionTree:
    """Coerce a raw dataset and wrap it in the tree class for its shape."""
    roots = build_nodes(dataset)
    return _TREE_CLASSES[detect_shape(roots)](roots, prefix)
