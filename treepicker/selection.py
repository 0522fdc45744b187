"""
selection.py

Selection state machine. A ``SelectionModel`` wraps one selection list and
answers tri-state queries from the selectable sets in ``resolver``; checked
and indeterminate are derived on every query, never stored.

Every toggle returns a NEW list and leaves the model untouched. Ids keep
their incoming order, additions are appended in tree order, and ids that
match nothing in the tree are carried through as-is.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from treepicker.nodes import TreeNode
from treepicker.resolver import all_leaf_ids, resolve_ids
from treepicker.shape import SelectionTree


class CheckState(Enum):
    UNCHECKED = "unchecked"
    CHECKED = "checked"
    INDETERMINATE = "indeterminate"

    @classmethod
    def from_counts(cls, selected: int, total: int) -> "CheckState":
        if total and selected == total:
            return cls.CHECKED
        if selected:
            return cls.INDETERMINATE
        return cls.UNCHECKED


class SelectionModel:
    """Tri-state queries and toggle operations over a selection list."""

    def __init__(self, tree: SelectionTree, selected_ids: Optional[Iterable[Any]] = None):
        self.tree = tree
        self._ids: List[Any] = list(selected_ids or [])
        self._keys = {str(i) for i in self._ids}

    @property
    def selected_ids(self) -> List[Any]:
        return list(self._ids)

    def with_ids(self, selected_ids: Iterable[Any]) -> "SelectionModel":
        return SelectionModel(self.tree, selected_ids)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_selected(self, unique_id: Any) -> bool:
        return str(unique_id) in self._keys

    def counts(self, node: TreeNode, ancestors: Sequence[Any] = ()) -> Tuple[int, int]:
        """Return ``(selected, total)`` over the node's selectable set."""
        ids = resolve_ids(self.tree, node, ancestors)
        return sum(1 for i in ids if self.is_selected(i)), len(ids)

    def check_state(self, node: TreeNode, ancestors: Sequence[Any] = ()) -> CheckState:
        return CheckState.from_counts(*self.counts(node, ancestors))

    def is_checked(self, node: TreeNode, ancestors: Sequence[Any] = ()) -> bool:
        return self.check_state(node, ancestors) is CheckState.CHECKED

    def is_indeterminate(self, node: TreeNode, ancestors: Sequence[Any] = ()) -> bool:
        return self.check_state(node, ancestors) is CheckState.INDETERMINATE

    def is_all_selected(self, view: Optional[SelectionTree] = None) -> bool:
        ids = all_leaf_ids(self._view_or_tree(view))
        return bool(ids) and all(self.is_selected(i) for i in ids)

    def selected_count(self, view: Optional[SelectionTree] = None) -> int:
        """Number of selected ids that are visible in ``view``."""
        visible = {str(i) for i in all_leaf_ids(self._view_or_tree(view))}
        return sum(1 for i in self._ids if str(i) in visible)

    # ------------------------------------------------------------------
    # Toggles
    # ------------------------------------------------------------------
    def toggle_leaf(self, unique_id: Any) -> List[Any]:
        if self.is_selected(unique_id):
            return self._without([unique_id])
        return self._with([unique_id])

    def toggle_branch(self, node: TreeNode, ancestors: Sequence[Any] = ()) -> List[Any]:
        return self._toggle_ids(resolve_ids(self.tree, node, ancestors))

    def toggle_all(self, view: Optional[SelectionTree] = None) -> List[Any]:
        return self._toggle_ids(all_leaf_ids(self._view_or_tree(view)))

    def clear_all(self, view: Optional[SelectionTree] = None) -> List[Any]:
        """Drop every id visible in ``view``; hidden selections stay."""
        return self._without(all_leaf_ids(self._view_or_tree(view)))

    def remove(self, unique_id: Any) -> List[Any]:
        return self._without([unique_id])

    def _view_or_tree(self, view: Optional[SelectionTree]) -> SelectionTree:
        return self.tree if view is None else view

    def _toggle_ids(self, ids: List[str]) -> List[Any]:
        if not ids:
            return self.selected_ids
        if all(self.is_selected(i) for i in ids):
            return self._without(ids)
        return self._with(ids)

    def _with(self, ids: Iterable[Any]) -> List[Any]:
        result = list(self._ids)
        seen = set(self._keys)
        for unique_id in ids:
            if str(unique_id) not in seen:
                seen.add(str(unique_id))
                result.append(unique_id)
        return result

    def _without(self, ids: Iterable[Any]) -> List[Any]:
        dropped = {str(i) for i in ids}
        return [i for i in self._ids if str(i) not in dropped]
