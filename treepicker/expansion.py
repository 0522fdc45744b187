"""
expansion.py

Which groups and sub-groups are open. Purely a view concern: nothing here
reads or writes the selection. Ids are stored as strings so raw ids of
different types (``1`` / ``"1"``) address the same row.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Set, Tuple

ChildKey = Tuple[str, str]


class ExpansionState:
    """Expanded root ids and expanded (root, child) pairs."""

    def __init__(
        self,
        roots: Optional[Iterable[Any]] = None,
        children: Optional[Iterable[Tuple[Any, Any]]] = None,
    ):
        self.roots: Set[str] = {str(r) for r in roots or ()}
        self.children: Set[ChildKey] = {(str(r), str(c)) for r, c in children or ()}

    def is_root_expanded(self, root_id: Any) -> bool:
        return str(root_id) in self.roots

    def is_child_expanded(self, root_id: Any, child_id: Any) -> bool:
        return (str(root_id), str(child_id)) in self.children

    def expand_root(self, root_id: Any) -> None:
        self.roots.add(str(root_id))

    def expand_child(self, root_id: Any, child_id: Any) -> None:
        self.children.add((str(root_id), str(child_id)))

    def discard_root(self, root_id: Any) -> None:
        self.roots.discard(str(root_id))

    def discard_child(self, root_id: Any, child_id: Any) -> None:
        self.children.discard((str(root_id), str(child_id)))

    def toggle_root(self, root_id: Any) -> bool:
        """Flip a root; returns the new expanded flag."""
        if self.is_root_expanded(root_id):
            self.discard_root(root_id)
            return False
        self.expand_root(root_id)
        return True

    def toggle_child(self, root_id: Any, child_id: Any) -> bool:
        if self.is_child_expanded(root_id, child_id):
            self.discard_child(root_id, child_id)
            return False
        self.expand_child(root_id, child_id)
        return True

    def union(self, other: "ExpansionState") -> None:
        self.roots |= other.roots
        self.children |= other.children

    def clear(self) -> None:
        self.roots.clear()
        self.children.clear()

    def __bool__(self) -> bool:
        return bool(self.roots or self.children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpansionState):
            return NotImplemented
        return self.roots == other.roots and self.children == other.children

    def __repr__(self) -> str:
        return f"ExpansionState(roots={sorted(self.roots)}, children={sorted(self.children)})"
