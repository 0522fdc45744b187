"""Exceptions raised by the tree picker."""


class TreePickerError(Exception):
    """Base class for tree picker errors."""


class InvalidIdentifierError(TreePickerError, ValueError):
    """A unique path identifier could not be parsed."""


class ShapeError(TreePickerError):
    """An operation was asked of a tree whose shape does not support it."""
