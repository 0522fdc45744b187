"""
search.py

Text filtering of the visible tree. Matching is a case-insensitive
substring test. Groups and sub-groups match on name only, items on name
or description:

- a node that matches is kept with ALL of its children;
- a node that does not match is kept only if some descendant survives,
  and then only with the surviving children.

Filtering builds a new tree and never touches the selection.
"""

from __future__ import annotations

from typing import List, Optional

from treepicker.expansion import ExpansionState
from treepicker.nodes import TreeNode
from treepicker.shape import SelectionTree


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def _filter_nodes(nodes: List[TreeNode], term: str, level: int, depth: int) -> List[TreeNode]:
    kept: List[TreeNode] = []
    for node in nodes:
        if node.matches(term, description=level >= depth):
            kept.append(node)
            continue
        if level < depth and node.has_children:
            children = _filter_nodes(node.children, term, level + 1, depth)
            if children:
                kept.append(node.with_items(children))
    return kept


def filter_tree(tree: SelectionTree, query: Optional[str]) -> SelectionTree:
    """Return the view of ``tree`` for ``query``; a blank query returns ``tree`` itself."""
    term = normalize_query(query)
    if not term:
        return tree
    return tree.derive(_filter_nodes(tree.roots, term, 1, tree.depth))


def search_expansion(view: SelectionTree, query: Optional[str]) -> ExpansionState:
    """Open every branch that survived filtering; nothing for a blank query."""
    expansion = ExpansionState()
    if not normalize_query(query):
        return expansion

    for root in view.roots:
        if root.has_children:
            expansion.expand_root(root.id)
        if view.depth < 3:
            continue
        for child in root.children:
            if child.has_children:
                expansion.expand_child(root.id, child.id)
    return expansion
