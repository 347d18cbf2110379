from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

from .errors import SettingNotFound, SettingTypeMismatch

_INDEX_SEGMENT = re.compile(r"^\[(\d+)\]$")


class NodeKind(Enum):
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    ARRAY = "array"
    LIST = "list"
    GROUP = "group"
    UNKNOWN = "unknown"


CONTAINER_KINDS = frozenset({NodeKind.ARRAY, NodeKind.LIST, NodeKind.GROUP})


@dataclass(frozen=True)
class ConfigNode:
    """Read-only node of a parsed acquisition config tree.

    Scalars carry ``value``; arrays, lists and groups carry ``children`` in
    source order. Group members also carry their ``name``.
    """

    kind: NodeKind
    name: Optional[str] = None
    value: Any = None
    children: Tuple["ConfigNode", ...] = ()

    @classmethod
    def from_python(cls, data: Any, name: Optional[str] = None) -> "ConfigNode":
        """Build a tree from parser output (mappings, lists, tuples, scalars)."""
        if isinstance(data, Mapping):
            children = tuple(cls.from_python(value, str(key)) for key, value in data.items())
            return cls(NodeKind.GROUP, name=name, children=children)
        if isinstance(data, list):
            return cls(NodeKind.ARRAY, name=name, children=tuple(cls.from_python(item) for item in data))
        if isinstance(data, tuple):
            return cls(NodeKind.LIST, name=name, children=tuple(cls.from_python(item) for item in data))
        # bool is an int subclass, check it first
        if isinstance(data, bool):
            return cls(NodeKind.BOOLEAN, name=name, value=data)
        if isinstance(data, int):
            return cls(NodeKind.INTEGER, name=name, value=int(data))
        if isinstance(data, float):
            return cls(NodeKind.FLOAT, name=name, value=data)
        if isinstance(data, str):
            return cls(NodeKind.STRING, name=name, value=data)
        return cls(NodeKind.UNKNOWN, name=name, value=data)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["ConfigNode"]:
        return iter(self.children)

    def child(self, name: str) -> Optional["ConfigNode"]:
        for item in self.children:
            if item.name == name:
                return item
        return None

    def lookup(self, path: str) -> "ConfigNode":
        """Return the node at a dotted path such as ``radiant.trigger.RF0.enabled``.

        ``[N]`` segments index into arrays, lists and groups by position.
        Raises SettingNotFound for missing or malformed paths and
        SettingTypeMismatch when a segment descends into a scalar.
        """
        if not path:
            raise SettingNotFound(path)
        node = self
        for segment in path.split("."):
            if not segment:
                raise SettingNotFound(path)
            match = _INDEX_SEGMENT.match(segment)
            if match:
                if node.kind not in CONTAINER_KINDS:
                    raise SettingTypeMismatch(path)
                index = int(match.group(1))
                if index >= len(node.children):
                    raise SettingNotFound(path)
                node = node.children[index]
                continue
            if node.kind is not NodeKind.GROUP:
                raise SettingTypeMismatch(path)
            found = node.child(segment)
            if found is None:
                raise SettingNotFound(path)
            node = found
        return node
