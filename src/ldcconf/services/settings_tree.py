"""Read-only view over a parsed settings document."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

_MISSING = object()


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


class SettingsTree:
    """Nested groups, arrays and scalars addressed by dotted paths.

    Groups are exposed as read-only mappings and arrays as tuples, so the
    tree cannot be changed after it is built.
    """

    def __init__(self, data: Mapping[str, Any]):
        self._root = _freeze(data)

    @property
    def root(self) -> Mapping[str, Any]:
        return self._root

    def _find(self, path: str) -> Any:
        node: Any = self._root
        for part in path.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return _MISSING
            node = node[part]
        return node

    def exists(self, path: str) -> bool:
        return self._find(path) is not _MISSING

    def lookup(self, path: str) -> Any:
        """Return the setting at *path*; raises KeyError if absent."""
        node = self._find(path)
        if node is _MISSING:
            raise KeyError(path)
        return node

    def is_group(self, path: str) -> bool:
        return isinstance(self._find(path), Mapping)

    def is_array(self, path: str) -> bool:
        return isinstance(self._find(path), tuple)
