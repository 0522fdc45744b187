"""Hierarchical multi-select engine for two- and three-level trees."""

from treepicker.expansion import ExpansionState
from treepicker.identity import NodePath, extract_raw_id, make_unique_id, same_id
from treepicker.nodes import TreeNode, build_nodes
from treepicker.picker import HierarchicalMultiSelect, PickerChip, PickerRow
from treepicker.resolver import all_leaf_ids, leaf_ids_of_branch, leaf_ids_of_root, resolve_ids
from treepicker.search import filter_tree, search_expansion
from treepicker.selection import CheckState, SelectionModel
from treepicker.shape import SelectionTree, ThreeLevelTree, TreeShape, TwoLevelTree, build_tree, detect_shape
from treepicker.sync import SelectionSync, expansion_for

__all__ = [
    "CheckState",
    "ExpansionState",
    "HierarchicalMultiSelect",
    "NodePath",
    "PickerChip",
    "PickerRow",
    "SelectionModel",
    "SelectionSync",
    "SelectionTree",
    "ThreeLevelTree",
    "TreeNode",
    "TreeShape",
    "TwoLevelTree",
    "all_leaf_ids",
    "build_nodes",
    "build_tree",
    "detect_shape",
    "expansion_for",
    "extract_raw_id",
    "filter_tree",
    "leaf_ids_of_branch",
    "leaf_ids_of_root",
    "make_unique_id",
    "resolve_ids",
    "same_id",
    "search_expansion",
]
