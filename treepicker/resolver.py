"""
resolver.py

Resolves any node to its selectable set: the unique ids of the finest
selectable units beneath it. Branches with children resolve to their
terminal descendants; a node without children stands in for itself, which
keeps empty categories selectable.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from treepicker.errors import ShapeError
from treepicker.identity import NodePath
from treepicker.nodes import TreeNode
from treepicker.shape import SelectionTree


def _collect(node: TreeNode, path: NodePath, depth: int) -> List[str]:
    if path.depth >= depth or not node.has_children:
        return [path.key]
    ids: List[str] = []
    for child in node.children:
        ids.extend(_collect(child, path.child(child.id), depth))
    return ids


def resolve_ids(tree: SelectionTree, node: TreeNode, ancestors: Sequence[Any] = ()) -> List[str]:
    """
    Selectable set of ``node``.

    Args:
        tree: Tree the node belongs to (supplies prefix and depth).
        node: Group, sub-group or item.
        ancestors: Raw ids from the root down to the node's parent.

    Returns:
        Unique ids in tree order.
    """
    return _collect(node, NodePath.of(tree.prefix, ancestors, node.id), tree.depth)


def leaf_ids_of_root(tree: SelectionTree, root: TreeNode) -> List[str]:
    return resolve_ids(tree, root)


def leaf_ids_of_branch(tree: SelectionTree, root_id: Any, branch: TreeNode) -> List[str]:
    if tree.depth < 3:
        raise ShapeError("Sub-group resolution needs a three-level tree")
    return resolve_ids(tree, branch, (root_id,))


def all_leaf_ids(tree: SelectionTree) -> List[str]:
    ids: List[str] = []
    for root in tree.roots:
        ids.extend(leaf_ids_of_root(tree, root))
    return ids
