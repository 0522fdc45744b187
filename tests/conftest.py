"""
Pytest configuration and fixtures for the tree picker tests.

This module provides:
- Two- and three-level sample datasets
- Trees built from them with the ``x`` prefix
- A mocked Streamlit container for widget tests
"""

from unittest.mock import MagicMock

import pytest

from treepicker.shape import build_tree

# ============================================================
# DATASETS
# ============================================================


@pytest.fixture
def scenario_data():
    """One group with two children sharing raw ids with the group."""
    return [
        {"id": 1, "name": "G1", "items": [{"id": 1, "name": "C1"}, {"id": 2, "name": "C2"}]},
    ]


@pytest.fixture
def two_level_data():
    return [
        {
            "id": 1,
            "name": "Engineering",
            "description": "Builds things",
            "items": [
                {"id": 10, "name": "Backend", "description": "APIs and services"},
                {"id": 11, "name": "Frontend"},
            ],
        },
        {
            "id": 2,
            "name": "Finance",
            "items": [
                {"id": 20, "name": "Payroll"},
                {"id": 21, "name": "Audit"},
            ],
        },
        {"id": 5, "name": "Misc", "items": []},
    ]


@pytest.fixture
def three_level_data():
    return [
        {
            "id": "M1",
            "name": "Operations",
            "items": [
                {
                    "id": "C1",
                    "name": "Logistics",
                    "items": [
                        {"id": "I1", "name": "Fleet"},
                        {"id": "I2", "name": "Warehouse"},
                    ],
                },
            ],
        },
        {
            "id": "M2",
            "name": "People",
            "items": [
                {
                    "id": "C2",
                    "name": "Recruiting",
                    "items": [
                        {"id": "I3", "name": "Sourcing"},
                        {"id": "I4", "name": "Interviews", "description": "Onsite loops"},
                    ],
                },
                {"id": "C3", "name": "Benefits", "items": []},
            ],
        },
    ]


# ============================================================
# TREES
# ============================================================


@pytest.fixture
def two_level_tree(two_level_data):
    return build_tree(two_level_data, "x")


@pytest.fixture
def three_level_tree(three_level_data):
    return build_tree(three_level_data, "x")


# ============================================================
# STREAMLIT
# ============================================================


@pytest.fixture
def session_state():
    return {}


@pytest.fixture
def container():
    """
    Mocked Streamlit container.

    ``expander`` returns ``container.body``; every ``columns`` call hands
    back the same two column mocks so widget calls can be inspected.
    """
    root = MagicMock()
    body = root.expander.return_value
    body.text_input.return_value = ""
    left, right = MagicMock(), MagicMock()
    body.columns.return_value = [left, right]
    root.body = body
    root.left = left
    root.right = right
    return root
