"""Defaults shared by the picker engine and its Streamlit binding."""

# Unique path identifiers
ID_SEPARATOR = "_"
DEFAULT_ID_PREFIX = "item"

# Labels
DEFAULT_TITLE = "Items"
DEFAULT_SEARCH_PLACEHOLDER = "Search..."
DEFAULT_EMPTY_MESSAGE = "No items available"
SELECT_ALL_LABEL = "Select All"
DESELECT_ALL_LABEL = "Deselect All"
CLEAR_LABEL = "Clear"

# Streamlit session-state key suffixes
STATE_SELECTED_SUFFIX = "selected"
STATE_PICKER_SUFFIX = "picker"
STATE_SEARCH_SUFFIX = "search"
