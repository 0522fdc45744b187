"""
sync.py

Reconciles the owner's selection list with the picker's working copy.

The owner holds the authoritative list and passes it in on every update.
``reconcile`` is the one place the working copy is overwritten from
outside: it replaces the copy wholesale (no merge) and opens every group
that contains a pre-selected id, so nothing selected sits hidden in a
collapsed branch. It does work when the incoming list differs from the last
one it saw, or from the working copy. Re-sending an unchanged list therefore
drops emitted changes the owner never accepted.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from treepicker.config.logging import Logger
from treepicker.errors import InvalidIdentifierError
from treepicker.expansion import ExpansionState
from treepicker.identity import NodePath
from treepicker.shape import SelectionTree


def expansion_for(selected_ids: Iterable[Any], prefix: str, logger: Optional[Logger] = None) -> ExpansionState:
    """
    Ancestors to open for a selection list.

    Args:
        selected_ids: Unique path identifiers.
        prefix: Only ids built with this prefix are considered.
        logger: Receives a warning for ids that cannot be parsed.

    Returns:
        Root ids of every selected id, plus the (root, sub-group) pair for
        ids that are three segments deep.
    """
    expansion = ExpansionState()
    for unique_id in selected_ids:
        try:
            path = NodePath.parse(str(unique_id))
        except InvalidIdentifierError as e:
            if logger:
                logger.warning(f"Skipping auto-expansion for {unique_id!r}: {e}", streamlit_off=True)
            continue
        if path.prefix != prefix or not path.path:
            continue
        expansion.expand_root(path.path[0])
        if path.depth >= 3:
            expansion.expand_child(path.path[0], path.path[1])
    return expansion


class SelectionSync:
    """Working copy of the owner's selection list."""

    def __init__(self, prefix: str, logger: Optional[Logger] = None):
        self.prefix = prefix
        self.logger = logger or Logger("treepicker.sync")
        self._working: List[Any] = []
        self._seen = False
        self._last_external: Optional[List[Any]] = None
        self._last_value: Optional[List[str]] = None

    @property
    def working_ids(self) -> List[Any]:
        return list(self._working)

    def has_changed(self, external_ids: Optional[List[Any]]) -> bool:
        """New list by reference, same list with different contents, or a working copy that drifted."""
        if not self._seen:
            return True
        if external_ids is not self._last_external:
            return True
        incoming = [str(i) for i in external_ids or []]
        return incoming != self._last_value or incoming != [str(i) for i in self._working]

    def reconcile(
        self,
        external_ids: Optional[List[Any]],
        tree: SelectionTree,
        expansion: ExpansionState,
    ) -> bool:
        """
        Replace the working copy if the owner's list changed.

        Returns True when a replacement happened.
        """
        if not self.has_changed(external_ids):
            return False

        incoming = list(external_ids or [])
        self.logger.debug(
            f"Selection changed by owner ({self.prefix}): {len(self._working)} -> {len(incoming)} ids"
        )
        self._working = incoming
        self._seen = True
        self._last_external = external_ids
        self._last_value = [str(i) for i in incoming]

        if incoming and not tree.is_empty:
            opened = expansion_for(incoming, self.prefix, self.logger)
            self.logger.debug(f"Auto-expanding for pre-selection: {opened!r}")
            expansion.union(opened)
        return True

    def commit(self, new_ids: List[Any]) -> None:
        """
        Adopt a list the picker is about to emit to the owner.

        The copy stands until the next ``reconcile``; an owner that answers
        with its unchanged list takes it back.
        """
        self._working = list(new_ids)
