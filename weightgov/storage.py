"""Key-value stores that remember their values at past block heights."""

from __future__ import annotations

from bisect import bisect_left, insort
from itertools import islice
from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class _History:
    """Values before the first change at each height."""

    def __init__(self) -> None:
        self._heights: list[int] = []
        self._before: dict[int, Any] = {}

    def record(self, height: int, old: Any) -> None:
        if height not in self._before:
            insort(self._heights, height)
            self._before[height] = old

    def value_at(self, height: int, current: Any) -> Any:
        index = bisect_left(self._heights, height)
        if index == len(self._heights):
            return current
        return self._before[self._heights[index]]


class SnapshotMap(Generic[K, V]):
    """A map whose value at the start of any height can be read back.

    A value saved at height ``h`` is visible from height ``h + 1`` on.
    """

    def __init__(self) -> None:
        self._values: dict[K, V] = {}
        self._history: dict[K, _History] = {}

    def _record(self, key: K, height: int) -> None:
        self._history.setdefault(key, _History()).record(height, self._values.get(key))

    def save(self, key: K, value: V, height: int) -> None:
        self._record(key, height)
        self._values[key] = value

    def remove(self, key: K, height: int) -> None:
        self._record(key, height)
        self._values.pop(key, None)

    def may_load(self, key: K) -> V | None:
        return self._values.get(key)

    def may_load_at_height(self, key: K, height: int) -> V | None:
        current = self._values.get(key)
        history = self._history.get(key)
        if history is None:
            return current
        return history.value_at(height, current)

    def range(self, start_after: K | None = None, limit: int | None = None) -> Iterator[tuple[K, V]]:
        """Yield current entries in ascending key order, after ``start_after``."""
        keys = sorted(k for k in self._values if start_after is None or k > start_after)
        return islice(((k, self._values[k]) for k in keys), limit)


class SnapshotItem(Generic[V]):
    """A single value whose history by height can be read back."""

    def __init__(self) -> None:
        self._value: V | None = None
        self._history = _History()

    def save(self, value: V, height: int) -> None:
        self._history.record(height, self._value)
        self._value = value

    def may_load(self) -> V | None:
        return self._value

    def may_load_at_height(self, height: int) -> V | None:
        return self._history.value_at(height, self._value)