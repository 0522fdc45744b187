"""
Tests for search filtering
==========================
"""

from treepicker.expansion import ExpansionState
from treepicker.search import filter_tree, normalize_query, search_expansion
from treepicker.shape import ThreeLevelTree, TwoLevelTree


def _names(tree):
    """Nested (name, children) outline of a tree for comparisons."""

    def outline(nodes):
        return [(n.name, outline(n.children)) for n in nodes]

    return outline(tree.roots)


class TestNormalizeQuery:
    def test_trims_and_lowercases(self):
        assert normalize_query("  PayRoll ") == "payroll"
        assert normalize_query(None) == ""


class TestFilterTwoLevel:
    """Test filtering a group -> item tree."""

    def test_blank_query_returns_same_tree(self, two_level_tree):
        assert filter_tree(two_level_tree, "") is two_level_tree
        assert filter_tree(two_level_tree, "   ") is two_level_tree
        assert filter_tree(two_level_tree, None) is two_level_tree

    def test_child_match_keeps_only_matching_children(self, two_level_tree):
        view = filter_tree(two_level_tree, "payroll")
        assert _names(view) == [("Finance", [("Payroll", [])])]

    def test_group_match_keeps_all_children(self, two_level_tree):
        view = filter_tree(two_level_tree, "engineer")
        assert _names(view) == [("Engineering", [("Backend", []), ("Frontend", [])])]

    def test_group_description_is_not_matched(self, two_level_tree):
        view = filter_tree(two_level_tree, "builds")
        assert view.is_empty

    def test_child_description_match(self, two_level_tree):
        view = filter_tree(two_level_tree, "apis")
        assert _names(view) == [("Engineering", [("Backend", [])])]

    def test_case_insensitive(self, two_level_tree):
        assert _names(filter_tree(two_level_tree, "PAYROLL")) == [("Finance", [("Payroll", [])])]

    def test_empty_branch_matches_by_name(self, two_level_tree):
        assert _names(filter_tree(two_level_tree, "misc")) == [("Misc", [])]

    def test_no_match(self, two_level_tree):
        view = filter_tree(two_level_tree, "nothing here")
        assert view.is_empty
        assert isinstance(view, TwoLevelTree)
        assert view.prefix == "x"

    def test_source_tree_untouched(self, two_level_tree):
        filter_tree(two_level_tree, "payroll")
        assert len(two_level_tree.roots) == 3
        assert len(two_level_tree.roots[1].children) == 2


class TestFilterThreeLevel:
    """Test filtering a group -> sub-group -> item tree."""

    def test_item_match(self, three_level_tree):
        view = filter_tree(three_level_tree, "warehouse")
        assert isinstance(view, ThreeLevelTree)
        assert _names(view) == [("Operations", [("Logistics", [("Warehouse", [])])])]

    def test_sub_group_match_keeps_its_items(self, three_level_tree):
        view = filter_tree(three_level_tree, "recruit")
        assert _names(view) == [("People", [("Recruiting", [("Sourcing", []), ("Interviews", [])])])]

    def test_group_match_keeps_everything_below(self, three_level_tree):
        view = filter_tree(three_level_tree, "people")
        assert _names(view) == [
            ("People", [("Recruiting", [("Sourcing", []), ("Interviews", [])]), ("Benefits", [])]),
        ]

    def test_item_description_match(self, three_level_tree):
        view = filter_tree(three_level_tree, "onsite")
        assert _names(view) == [("People", [("Recruiting", [("Interviews", [])])])]

    def test_match_across_groups(self, three_level_tree):
        view = filter_tree(three_level_tree, "i")
        assert [root.name for root in view.roots] == ["Operations", "People"]


class TestSearchExpansion:
    """Surviving branches are forced open while a query is active."""

    def test_blank_query(self, three_level_tree):
        expansion = search_expansion(three_level_tree, "")
        assert expansion == ExpansionState()
        assert not expansion

    def test_three_level(self, three_level_tree):
        view = filter_tree(three_level_tree, "warehouse")
        assert search_expansion(view, "warehouse") == ExpansionState(["M1"], [("M1", "C1")])

    def test_empty_sub_group_is_not_expanded(self, three_level_tree):
        view = filter_tree(three_level_tree, "people")
        assert search_expansion(view, "people") == ExpansionState(["M2"], [("M2", "C2")])

    def test_two_level(self, two_level_tree):
        view = filter_tree(two_level_tree, "payroll")
        assert search_expansion(view, "payroll") == ExpansionState([2])

    def test_empty_group_is_not_expanded(self, two_level_tree):
        view = filter_tree(two_level_tree, "misc")
        assert not search_expansion(view, "misc")
