"""Association lists: maps, multimaps and sets with custom key comparison."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from graphquest.linkedlist import CursorList

Comparison = Callable[[Any, Any], Any]


@dataclass
class MapPair:
    key: Any
    value: Any


class Map:
    """Map with unique keys.

    With ``lower_than`` the pairs are kept sorted by key and two keys are
    equal when neither is lower than the other. Otherwise pairs keep insertion
    order and ``is_equal`` (``==`` by default) decides equality.
    """

    def __init__(
        self, is_equal: Comparison | None = None, lower_than: Comparison | None = None
    ) -> None:
        if is_equal is None and lower_than is None:
            is_equal = operator.eq
        self._is_equal_fn = is_equal
        self._lower_than = lower_than
        self._pairs = CursorList()

    def _add(self, key: Any, value: Any) -> None:
        pair = MapPair(key, value)
        if self._lower_than is not None:
            lower_than = self._lower_than
            self._pairs.sorted_insert(pair, lambda a, b: lower_than(a.key, b.key))
        else:
            self._pairs.push_back(pair)

    def _matches(self, pair: MapPair, key: Any) -> bool:
        if self._is_equal_fn is not None and self._is_equal_fn(pair.key, key):
            return True
        lower_than = self._lower_than
        return bool(
            lower_than is not None
            and not lower_than(pair.key, key)
            and not lower_than(key, pair.key)
        )

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair unless the key is already present."""
        if self.search(key) is not None:
            return
        self._add(key, value)

    def remove(self, key: Any) -> MapPair | None:
        """Remove and return the first pair with ``key``, or None."""
        pair = self._pairs.first()
        while pair is not None:
            if self._matches(pair, key):
                self._pairs.pop_current()
                return pair
            pair = self._pairs.next()
        return None

    def search(self, key: Any) -> MapPair | None:
        """Return the first pair with ``key``, leaving the cursor on it, or None."""
        pair = self._pairs.first()
        while pair is not None:
            if self._matches(pair, key):
                return pair
            pair = self._pairs.next()
        return None

    def first(self) -> MapPair | None:
        return self._pairs.first()

    def next(self) -> MapPair | None:
        return self._pairs.next()

    def clean(self) -> None:
        self._pairs.clean()

    def __iter__(self) -> Iterator[MapPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class MultiMap(Map):
    """Map that keeps every inserted pair, duplicate keys included."""

    def insert(self, key: Any, value: Any) -> None:
        self._add(key, value)


class KeySet:
    """Set of values built on a map whose keys are the values themselves."""

    def __init__(
        self, is_equal: Comparison | None = None, lower_than: Comparison | None = None
    ) -> None:
        self._map = Map(is_equal, lower_than)

    def insert(self, value: Any) -> None:
        self._map.insert(value, value)

    def remove(self, value: Any) -> Any:
        """Remove a matching value and return the stored one, or None."""
        pair = self._map.remove(value)
        return None if pair is None else pair.key

    def search(self, value: Any) -> Any:
        pair = self._map.search(value)
        return None if pair is None else pair.key

    def clean(self) -> None:
        self._map.clean()

    def __iter__(self) -> Iterator[Any]:
        return (pair.key for pair in self._map)

    def __len__(self) -> int:
        return len(self._map)