"""A trie mapping sequences of keys to values."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING: Any = object()


@dataclass(eq=False)
class _Node:
    children: dict[Any, "_Node"] = field(default_factory=dict)
    value: Any = _MISSING


class Trie(Generic[K, V]):
    """Maps sequences of hashable parts (such as strings or lists) to values."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, key: Iterable[K], value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        node = self._root
        for part in key:
            node = node.children.setdefault(part, _Node())
        node.value = value

    def get(self, key: Iterable[K]) -> Optional[V]:
        """Return the value stored under ``key``, or None if there is none."""
        node = self._root
        for part in key:
            child = node.children.get(part)
            if child is None:
                return None
            node = child
        return None if node.value is _MISSING else node.value