"""
identity.py

Path-based identifiers for picker nodes.

Raw node ids are only unique among siblings, so every node is addressed by
its full ancestor chain plus a per-instance prefix. In memory that is a
``NodePath``; it is turned into a string only when it crosses into the
owner's selection list:

    NodePath("x", ("1", "2")).key  ->  "x_1_2"

Segments escape ``%`` and the separator, so ids containing ``_`` survive a
round trip and cannot collide with a deeper path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from treepicker.config.const import ID_SEPARATOR
from treepicker.errors import InvalidIdentifierError

_ESCAPES = {"%": "%25", ID_SEPARATOR: "%5F"}
_UNESCAPES = {code: char for char, code in _ESCAPES.items()}
_ESCAPE_RE = re.compile("|".join(re.escape(char) for char in _ESCAPES))
_UNESCAPE_RE = re.compile("|".join(re.escape(code) for code in _UNESCAPES))


def _escape(value: Any) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], str(value))


def _unescape(segment: str) -> str:
    return _UNESCAPE_RE.sub(lambda m: _UNESCAPES[m.group(0)], segment)


@dataclass(frozen=True)
class NodePath:
    """Structured identifier: instance prefix plus raw ids from root down."""

    prefix: str
    path: Tuple[str, ...] = ()

    @classmethod
    def of(cls, prefix: str, ancestor_ids: Iterable[Any] = (), own_id: Any = None) -> "NodePath":
        parts = tuple(str(a) for a in ancestor_ids)
        if own_id is not None:
            parts += (str(own_id),)
        return cls(prefix, parts)

    def child(self, raw_id: Any) -> "NodePath":
        return NodePath(self.prefix, self.path + (str(raw_id),))

    @property
    def raw_id(self) -> Optional[str]:
        return self.path[-1] if self.path else None

    @property
    def root_id(self) -> Optional[str]:
        return self.path[0] if self.path else None

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def key(self) -> str:
        """Serialised form used in selection lists."""
        return ID_SEPARATOR.join(_escape(part) for part in (self.prefix,) + self.path)

    @classmethod
    def parse(cls, key: Any) -> "NodePath":
        """Inverse of ``key``."""
        if not isinstance(key, str) or not key:
            raise InvalidIdentifierError(f"Not a unique path identifier: {key!r}")
        segments = [_unescape(s) for s in key.split(ID_SEPARATOR)]
        return cls(segments[0], tuple(segments[1:]))

    def __str__(self) -> str:
        return self.key


def make_unique_id(prefix: str, ancestor_ids: Iterable[Any], own_id: Any) -> str:
    """Encode a node position as ``{prefix}_{ancestor}..._{own}``."""
    return NodePath.of(prefix, ancestor_ids, own_id).key


def extract_raw_id(unique_id: Any) -> str:
    """Return the terminal raw id of a unique path identifier, as a string."""
    if not isinstance(unique_id, str):
        return str(unique_id)
    return _unescape(unique_id.split(ID_SEPARATOR)[-1])


def same_id(left: Any, right: Any) -> bool:
    """Ids are compared by their string form (``1`` equals ``"1"``)."""
    return str(left) == str(right)
