"""Priority queue that yields the highest priority first."""

from __future__ import annotations

from typing import Any


class Heap:
    """Binary max-heap keyed by integer priority."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def push(self, data: Any, priority: int) -> None:
        entries = self._entries
        entries.append((priority, data))
        now = len(entries) - 1
        while now > 0 and entries[(now - 1) // 2][0] < priority:
            parent = (now - 1) // 2
            entries[now] = entries[parent]
            now = parent
        entries[now] = (priority, data)

    def top(self) -> Any:
        """Data with the highest priority, or None if empty."""
        return self._entries[0][1] if self._entries else None

    def pop(self) -> Any:
        """Remove and return the data with the highest priority."""
        if not self._entries:
            raise IndexError("pop from an empty heap")
        entries = self._entries
        removed = entries[0][1]
        last = entries.pop()
        if not entries:
            return removed
        entries[0] = last
        priority = last[0]
        size = len(entries)
        now = 1
        while (now < size and entries[now][0] > priority) or (
            now + 1 < size and entries[now + 1][0] > priority
        ):
            parent = (now - 1) // 2
            if now + 1 < size and entries[now][0] < entries[now + 1][0]:
                now += 1
            entries[parent], entries[now] = entries[now], entries[parent]
            now = now * 2 + 1
        return removed

    def __len__(self) -> int:
        return len(self._entries)