"""
streamlit_picker.py

Streamlit binding for the tree picker. The widget plays the owner's role:
the selection list lives in session state, is fed back into the picker on
every rerun and is overwritten by the picker's ``on_change``. The picker
instance itself is cached in session state so search and expansion survive
reruns.

Checkbox values are written to session state BEFORE the widgets are
created; Streamlit rejects writes to a widget key after instantiation.
"""

from __future__ import annotations

from typing import Any, Iterable, List, MutableMapping, Optional

import streamlit as st

from treepicker.config.const import (
    CLEAR_LABEL,
    DEFAULT_TITLE,
    DESELECT_ALL_LABEL,
    SELECT_ALL_LABEL,
    STATE_PICKER_SUFFIX,
    STATE_SEARCH_SUFFIX,
    STATE_SELECTED_SUFFIX,
)
from treepicker.picker import HierarchicalMultiSelect, PickerChip, PickerRow
from treepicker.selection import CheckState

_INDENT = "\u2003"


class TreePickerWidget:
    """Hierarchical multi-select rendered with Streamlit widgets."""

    def __init__(
        self,
        data: Iterable[Any],
        *,
        state_key: str = "tp",
        title: str = DEFAULT_TITLE,
        id_prefix: Optional[str] = None,
        state: Optional[MutableMapping[str, Any]] = None,
    ):
        self.state = st.session_state if state is None else state
        self.state_key = state_key

        # Internal session-state keys (not bound to widgets)
        self._selected_key = f"{state_key}_{STATE_SELECTED_SUFFIX}"
        self._picker_key = f"{state_key}_{STATE_PICKER_SUFFIX}"

        # Widget keys
        self._w_search = f"{state_key}_{STATE_SEARCH_SUFFIX}"
        self._w_select_all = f"{state_key}_select_all"
        self._w_clear = f"{state_key}_clear"
        self._w_clear_search = f"{state_key}_clear_search"

        self.state.setdefault(self._selected_key, [])

        picker = self.state.get(self._picker_key)
        if picker is None:
            picker = HierarchicalMultiSelect(id_prefix=id_prefix or state_key, title=title)
            self.state[self._picker_key] = picker
        picker.on_change = self._store
        picker.update(data=data, selected_ids=self.state[self._selected_key])
        self.picker: HierarchicalMultiSelect = picker

    @property
    def selected_ids(self) -> List[Any]:
        return list(self.state[self._selected_key])

    def _store(self, new_ids: List[Any]) -> None:
        self.state[self._selected_key] = new_ids

    # ------------------------------------------------------------------
    # Widget keys
    # ------------------------------------------------------------------
    def _row_key(self, row: PickerRow) -> str:
        return f"{self.state_key}::row::{row.unique_id}"

    def _expand_key(self, row: PickerRow) -> str:
        return f"{self.state_key}::expand::{row.unique_id}"

    def _chip_key(self, chip: PickerChip) -> str:
        return f"{self.state_key}::chip::{chip.unique_id}"

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def _on_row_change(self, row: PickerRow) -> None:
        if row.is_group:
            self.picker.toggle_group(row.node, row.ancestors)
        else:
            self.picker.toggle_item(row.unique_id)

    def _on_expand(self, row: PickerRow) -> None:
        if row.level == 0:
            self.picker.toggle_root_expansion(row.node.id)
        else:
            self.picker.toggle_child_expansion(row.ancestors[0], row.node.id)

    def _on_clear_search(self) -> None:
        self.state[self._w_search] = ""
        self.picker.clear_search()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render_row(self, container, row: PickerRow) -> None:
        expand_col, check_col = container.columns([1, 12])

        if row.is_group and row.node.has_children:
            expand_col.button(
                "▾" if row.expanded else "▸",
                key=self._expand_key(row),
                on_click=self._on_expand,
                args=(row,),
            )

        label = f"{_INDENT * row.level}{row.node.name}"
        if row.is_group:
            label = f"{label} ({row.counter})"

        key = self._row_key(row)
        self.state[key] = row.state is CheckState.CHECKED
        check_col.checkbox(label, key=key, on_change=self._on_row_change, args=(row,))

    def render(self, container=None) -> List[Any]:
        """Render the picker and return the current selection list."""
        if container is None:
            container = st

        picker = self.picker
        body = container.expander(picker.button_text, expanded=True)

        search_val = body.text_input(
            picker.search_placeholder,
            key=self._w_search,
            placeholder=picker.search_placeholder,
            label_visibility="collapsed",
        )
        if (search_val or "") != picker.search_term:
            picker.set_search(search_val)
        if picker.search_term:
            body.button("✕", key=self._w_clear_search, on_click=self._on_clear_search)

        rows = picker.rows()
        if not rows:
            body.caption(picker.empty_message)
            return self.selected_ids

        for row in rows:
            self._render_row(body, row)

        select_col, clear_col = body.columns(2)
        select_col.button(
            DESELECT_ALL_LABEL if picker.all_selected else SELECT_ALL_LABEL,
            key=self._w_select_all,
            on_click=picker.select_all,
        )
        if picker.selected_count:
            clear_col.button(CLEAR_LABEL, key=self._w_clear, on_click=picker.clear_all)

        body.caption(f"**{picker.selected_count}** selected")
        self._render_chips(body)
        return self.selected_ids

    def _render_chips(self, container) -> None:
        """One removable button per selected id, in selection order."""
        for chip in self.picker.chips():
            container.button(
                f"{chip.label} ✕",
                key=self._chip_key(chip),
                on_click=self.picker.remove,
                args=(chip.unique_id,),
            )
