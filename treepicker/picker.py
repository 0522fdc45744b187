"""
picker.py

Engine facade for a hierarchical multi-select widget.

``HierarchicalMultiSelect`` is a controlled component: the owner keeps the
selection list, passes it in through ``update`` and stores whatever
``on_change`` hands back. The picker keeps a working copy for queries,
plus purely presentational state (open flag, search term, expansion) that
is never exported.

Every interaction computes the next list from the current working copy and
emits it synchronously; nothing is queued.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

from treepicker.config.const import (
    DEFAULT_EMPTY_MESSAGE,
    DEFAULT_ID_PREFIX,
    DEFAULT_SEARCH_PLACEHOLDER,
    DEFAULT_TITLE,
)
from treepicker.config.logging import Logger
from treepicker.errors import InvalidIdentifierError
from treepicker.expansion import ExpansionState
from treepicker.identity import NodePath, extract_raw_id
from treepicker.nodes import TreeNode
from treepicker.search import filter_tree, search_expansion
from treepicker.selection import CheckState, SelectionModel
from treepicker.shape import SelectionTree, build_tree
from treepicker.sync import SelectionSync, expansion_for

OnChange = Callable[[List[Any]], None]

_UNSET: Any = object()


@dataclass(frozen=True)
class PickerRow:
    """One visible line of the picker, in display order."""

    node: TreeNode
    ancestors: Tuple[str, ...]
    unique_id: str
    level: int
    is_group: bool
    expanded: bool
    state: CheckState
    selected: int
    total: int

    @property
    def counter(self) -> str:
        """``"2/5"`` once something is selected, ``"5"`` otherwise."""
        return f"{self.selected}/{self.total}" if self.selected else str(self.total)


@dataclass(frozen=True)
class PickerChip:
    """A selected id as shown in the owner's summary."""

    unique_id: Any
    label: str
    visible: bool


class HierarchicalMultiSelect:
    """Selection engine for a two- or three-level tree picker."""

    def __init__(
        self,
        data: Optional[Iterable[Any]] = None,
        selected_ids: Optional[List[Any]] = None,
        on_change: Optional[OnChange] = None,
        *,
        id_prefix: str = DEFAULT_ID_PREFIX,
        title: str = DEFAULT_TITLE,
        search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER,
        empty_message: str = DEFAULT_EMPTY_MESSAGE,
        logger: Optional[Logger] = None,
    ):
        self.id_prefix = id_prefix
        self.title = title
        self.search_placeholder = search_placeholder
        self.empty_message = empty_message
        self.on_change = on_change
        self.logger = logger or Logger("treepicker.picker")

        self.is_open = False
        self.expansion = ExpansionState()
        self._search_term = ""
        self._search_expansion = ExpansionState()
        self._sync = SelectionSync(id_prefix, self.logger)

        self._data: Any = _UNSET
        self.tree: SelectionTree = build_tree([], id_prefix)
        self._view: SelectionTree = self.tree
        self.update(data=data if data is not None else [], selected_ids=selected_ids)

    # ------------------------------------------------------------------
    # Owner updates
    # ------------------------------------------------------------------
    def update(self, data: Any = _UNSET, selected_ids: Any = _UNSET) -> bool:
        """
        Feed new props from the owner.

        Args:
            data: Replacement dataset. A new object that differs in value
                re-derives the tree shape; an equal copy is ignored.
            selected_ids: The owner's current selection list.

        Returns:
            True if the working copy was replaced from ``selected_ids``.
        """
        # Streamlit owners rebuild the dataset literal on every rerun
        data_changed = data is not _UNSET and data is not self._data and data != self._data
        if data_changed:
            self._data = data
            self.tree = build_tree(data, self.id_prefix)
            self.logger.debug(
                f"Dataset replaced ({self.id_prefix}): {len(self.tree)} groups, {self.tree.shape.name}"
            )

        synced = False
        if selected_ids is not _UNSET:
            synced = self._sync.reconcile(selected_ids, self.tree, self.expansion)

        if data_changed:
            working = self._sync.working_ids
            if working and not synced:
                self.expansion.union(expansion_for(working, self.id_prefix, self.logger))
            self._refresh_view()
        return synced

    @property
    def selected_ids(self) -> List[Any]:
        return self._sync.working_ids

    @property
    def selection(self) -> SelectionModel:
        return SelectionModel(self.tree, self._sync.working_ids)

    # ------------------------------------------------------------------
    # Dropdown and search
    # ------------------------------------------------------------------
    def open(self) -> None:
        self.is_open = True
        self.set_search("")

    def close(self) -> None:
        self.is_open = False

    def toggle_dropdown(self) -> bool:
        if self.is_open:
            self.close()
        else:
            self.open()
        return self.is_open

    @property
    def search_term(self) -> str:
        return self._search_term

    def set_search(self, term: Optional[str]) -> None:
        self._search_term = term or ""
        self._refresh_view()

    def clear_search(self) -> None:
        self.set_search("")

    @property
    def view(self) -> SelectionTree:
        """The tree narrowed by the current search term."""
        return self._view

    def _refresh_view(self) -> None:
        self._view = filter_tree(self.tree, self._search_term)
        self._search_expansion = search_expansion(self._view, self._search_term)

    # ------------------------------------------------------------------
    # Expansion
    # ------------------------------------------------------------------
    def is_root_expanded(self, root_id: Any) -> bool:
        return self.expansion.is_root_expanded(root_id) or self._search_expansion.is_root_expanded(root_id)

    def is_child_expanded(self, root_id: Any, child_id: Any) -> bool:
        return self.expansion.is_child_expanded(root_id, child_id) or self._search_expansion.is_child_expanded(
            root_id, child_id
        )

    def toggle_root_expansion(self, root_id: Any) -> bool:
        if self.is_root_expanded(root_id):
            self.expansion.discard_root(root_id)
            self._search_expansion.discard_root(root_id)
            return False
        self.expansion.expand_root(root_id)
        return True

    def toggle_child_expansion(self, root_id: Any, child_id: Any) -> bool:
        if self.is_child_expanded(root_id, child_id):
            self.expansion.discard_child(root_id, child_id)
            self._search_expansion.discard_child(root_id, child_id)
            return False
        self.expansion.expand_child(root_id, child_id)
        return True

    def _is_expanded(self, ancestors: Sequence[str], node_id: Any) -> bool:
        if not ancestors:
            return self.is_root_expanded(node_id)
        return self.is_child_expanded(ancestors[0], node_id)

    # ------------------------------------------------------------------
    # Interactions
    # ------------------------------------------------------------------
    def toggle_item(self, unique_id: Any) -> List[Any]:
        return self._emit(self.selection.toggle_leaf(unique_id))

    def toggle_group(self, node: TreeNode, ancestors: Sequence[Any] = ()) -> List[Any]:
        return self._emit(self.selection.toggle_branch(node, ancestors))

    def select_all(self) -> List[Any]:
        """Select every visible item, or deselect them if all already are."""
        return self._emit(self.selection.toggle_all(self._view))

    def clear_all(self) -> List[Any]:
        return self._emit(self.selection.clear_all(self._view))

    def remove(self, unique_id: Any) -> List[Any]:
        return self._emit(self.selection.remove(unique_id))

    def _emit(self, new_ids: List[Any]) -> List[Any]:
        self._sync.commit(new_ids)
        self.logger.debug(f"Emitting selection ({self.id_prefix}): {len(new_ids)} ids")
        if self.on_change is not None:
            self.on_change(list(new_ids))
        return new_ids

    # ------------------------------------------------------------------
    # Read-outs
    # ------------------------------------------------------------------
    @property
    def selected_count(self) -> int:
        return self.selection.selected_count(self._view)

    @property
    def all_selected(self) -> bool:
        return self.selection.is_all_selected(self._view)

    @property
    def button_text(self) -> str:
        count = self.selected_count
        if count == 0:
            return f"Select {self.title}"
        return f"{count} Selected"

    def rows(self) -> List[PickerRow]:
        """Flatten the visible tree, honouring expansion."""
        selection = self.selection
        rows: List[PickerRow] = []
        for root in self._view.roots:
            self._append_rows(rows, selection, root, ())
        return rows

    def _append_rows(
        self,
        rows: List[PickerRow],
        selection: SelectionModel,
        node: TreeNode,
        ancestors: Tuple[str, ...],
    ) -> None:
        level = len(ancestors)
        is_group = level < self.tree.depth - 1
        expanded = is_group and node.has_children and self._is_expanded(ancestors, node.id)
        selected, total = selection.counts(node, ancestors)
        rows.append(
            PickerRow(
                node=node,
                ancestors=ancestors,
                unique_id=NodePath.of(self.id_prefix, ancestors, node.id).key,
                level=level,
                is_group=is_group,
                expanded=expanded,
                state=CheckState.from_counts(selected, total),
                selected=selected,
                total=total,
            )
        )
        if expanded:
            for child in node.children:
                self._append_rows(rows, selection, child, ancestors + (str(node.id),))

    def chips(self) -> List[PickerChip]:
        """Selected ids in selection order, labelled from the full tree."""
        chips: List[PickerChip] = []
        for unique_id in self._sync.working_ids:
            node = None
            try:
                path = NodePath.parse(str(unique_id))
            except InvalidIdentifierError:
                path = None
            if path is not None:
                node = self.tree.find(path)
            label = node.name if node is not None and node.name else extract_raw_id(unique_id)
            visible = path is not None and self._view.find(path) is not None
            chips.append(PickerChip(unique_id=unique_id, label=label, visible=visible))
        return chips
