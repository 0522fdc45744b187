"""
Tests for owner / working-copy reconciliation
==============================================
"""

from unittest.mock import MagicMock

from treepicker.expansion import ExpansionState
from treepicker.shape import build_tree
from treepicker.sync import SelectionSync, expansion_for


class TestExpansionFor:
    """Ancestors of selected ids are opened."""

    def test_two_level(self):
        assert expansion_for(["x_1_10", "x_2_20"], "x") == ExpansionState(["1", "2"])

    def test_three_level(self):
        expansion = expansion_for(["x_M1_C1_I1", "x_M2_C3"], "x")
        assert expansion.roots == {"M1", "M2"}
        assert expansion.children == {("M1", "C1")}

    def test_other_prefix_ignored(self):
        assert not expansion_for(["y_1_2", "x"], "x")

    def test_unparseable_ids_are_logged_and_skipped(self):
        logger = MagicMock()
        expansion = expansion_for(["", "x_1"], "x", logger)

        assert expansion.roots == {"1"}
        logger.warning.assert_called_once()


class TestReconcile:
    """Test full replacement of the working copy."""

    def test_first_call_replaces(self, two_level_tree):
        sync = SelectionSync("x")
        expansion = ExpansionState()

        assert sync.reconcile(["x_1_10"], two_level_tree, expansion)
        assert sync.working_ids == ["x_1_10"]
        assert expansion.roots == {"1"}

    def test_same_list_is_a_no_op(self, two_level_tree):
        sync = SelectionSync("x")
        ids = ["x_1_10"]
        sync.reconcile(ids, two_level_tree, ExpansionState())

        assert not sync.reconcile(ids, two_level_tree, ExpansionState())

    def test_list_mutated_in_place_is_detected(self, two_level_tree):
        sync = SelectionSync("x")
        ids = ["x_1_10"]
        sync.reconcile(ids, two_level_tree, ExpansionState())
        ids.append("x_2_20")

        assert sync.reconcile(ids, two_level_tree, ExpansionState())
        assert sync.working_ids == ["x_1_10", "x_2_20"]

    def test_new_list_replaces_without_merge(self, two_level_tree):
        sync = SelectionSync("x")
        sync.reconcile(["x_1_10", "x_1_11"], two_level_tree, ExpansionState())

        assert sync.reconcile(["x_2_20"], two_level_tree, ExpansionState())
        assert sync.working_ids == ["x_2_20"]

    def test_none_is_empty(self, two_level_tree):
        sync = SelectionSync("x")

        assert sync.reconcile(None, two_level_tree, ExpansionState())
        assert sync.working_ids == []
        assert not sync.reconcile(None, two_level_tree, ExpansionState())

    def test_expansion_is_unioned(self, two_level_tree):
        sync = SelectionSync("x")
        expansion = ExpansionState(["9"])

        sync.reconcile(["x_1_10"], two_level_tree, expansion)

        assert expansion.roots == {"9", "1"}

    def test_empty_selection_leaves_expansion(self, two_level_tree):
        sync = SelectionSync("x")
        expansion = ExpansionState(["9"])

        sync.reconcile([], two_level_tree, expansion)

        assert expansion.roots == {"9"}

    def test_empty_tree_skips_expansion(self):
        sync = SelectionSync("x")
        expansion = ExpansionState()

        assert sync.reconcile(["x_1_10"], build_tree([], "x"), expansion)
        assert not expansion

    def test_unknown_ids_are_kept(self, two_level_tree):
        sync = SelectionSync("x")
        sync.reconcile(["x_77_1", "legacy"], two_level_tree, ExpansionState())
        assert sync.working_ids == ["x_77_1", "legacy"]


class TestCommit:
    """Emitted lists become the working copy until the owner answers."""

    def test_commit_is_visible_before_owner_answers(self, two_level_tree):
        sync = SelectionSync("x")
        sync.reconcile(["x_1_10"], two_level_tree, ExpansionState())

        sync.commit(["x_1_10", "x_2_20"])
        sync.commit(["x_1_10", "x_2_20", "x_2_21"])

        assert sync.working_ids == ["x_1_10", "x_2_20", "x_2_21"]

    def test_unchanged_owner_list_overrules_commit(self, two_level_tree):
        sync = SelectionSync("x")
        owner_ids = ["x_1_10"]
        sync.reconcile(owner_ids, two_level_tree, ExpansionState())

        sync.commit(["x_1_10", "x_2_20"])

        assert sync.reconcile(owner_ids, two_level_tree, ExpansionState())
        assert sync.working_ids == ["x_1_10"]
        assert not sync.reconcile(owner_ids, two_level_tree, ExpansionState())

    def test_owner_change_wins_over_commit(self, two_level_tree):
        sync = SelectionSync("x")
        sync.reconcile([], two_level_tree, ExpansionState())
        sync.commit(["x_1_10"])

        sync.reconcile(["x_2_21"], two_level_tree, ExpansionState())

        assert sync.working_ids == ["x_2_21"]
