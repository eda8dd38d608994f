"""A list with a movable cursor, plus simple stack and queue types."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any


class CursorList:
    """Ordered sequence with a cursor used for step-by-step traversal."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)
        self._cursor: int | None = None

    def first(self) -> Any:
        """Move the cursor to the first element and return it, or None if empty."""
        if not self._items:
            return None
        self._cursor = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return that element, or None at the end."""
        if self._cursor is None or self._cursor + 1 >= len(self._items):
            return None
        self._cursor += 1
        return self._items[self._cursor]

    def push_front(self, data: Any) -> None:
        self._items.insert(0, data)
        if self._cursor is not None:
            self._cursor += 1

    def push_back(self, data: Any) -> None:
        self._items.append(data)

    def push_current(self, data: Any) -> None:
        """Insert after the cursor; does nothing when no cursor is set."""
        if self._cursor is None:
            return
        self._items.insert(self._cursor + 1, data)

    def sorted_insert(self, data: Any, lower_than: Callable[[Any, Any], Any]) -> None:
        """Insert before the first element that ``data`` is lower than."""
        if not self._items or lower_than(data, self._items[0]):
            self.push_front(data)
            return
        position = next(
            (
                index
                for index, item in enumerate(self._items[1:], start=1)
                if lower_than(data, item)
            ),
            len(self._items),
        )
        self._cursor = position - 1
        self.push_current(data)

    def pop_front(self) -> Any:
        if not self._items:
            return None
        data = self._items.pop(0)
        if self._cursor is not None:
            self._cursor = None if self._cursor == 0 else self._cursor - 1
        return data

    def pop_back(self) -> Any:
        if not self._items:
            return None
        data = self._items.pop()
        if self._cursor == len(self._items):
            self._cursor = None
        return data

    def pop_current(self) -> Any:
        """Remove the element under the cursor; the cursor moves to its successor."""
        if self._cursor is None:
            return None
        data = self._items.pop(self._cursor)
        if self._cursor >= len(self._items):
            self._cursor = None
        return data

    def clean(self) -> None:
        self._items.clear()
        self._cursor = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"CursorList({self._items!r})"


class Stack:
    """Last-in, first-out container; empty reads return None."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, data: Any) -> None:
        self._items.append(data)

    def top(self) -> Any:
        return self._items[-1] if self._items else None

    def pop(self) -> Any:
        return self._items.pop() if self._items else None

    def clean(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)


class Queue:
    """First-in, first-out container; empty reads return None."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def insert(self, data: Any) -> None:
        self._items.append(data)

    def front(self) -> Any:
        return self._items[0] if self._items else None

    def remove(self) -> Any:
        return self._items.popleft() if self._items else None

    def clean(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)