"""
contact_store.store.sort_index

Ordered index keyed by `(sort_key, contact_id)`.

Responsibilities:
- Keep entries in ascending key order for sorted scans.
- Answer inclusive, prefix-aware range queries in O(log n + k).
"""

from __future__ import annotations

import sys
from bisect import bisect_left, insort
from typing import Generic, TypeVar

V = TypeVar("V")

# Appended to the upper bound so every key that starts with it falls inside the range.
MAX_CHAR = chr(sys.maxunicode)

IndexKey = tuple[str, str]


class SortIndex(Generic[V]):
    """
    Sorted list of keys (binary search) plus a dict holding the values.

    The contact id is part of the key, so two records sharing a sort key
    are both kept instead of overwriting each other.
    """

    def __init__(self) -> None:
        self._keys: list[IndexKey] = []
        self._values: dict[IndexKey, V] = {}

    def put(self, sort_key: str, contact_id: str, value: V) -> None:
        key = (sort_key, contact_id)
        if key not in self._values:
            insort(self._keys, key)
        self._values[key] = value

    def remove(self, sort_key: str, contact_id: str) -> bool:
        key = (sort_key, contact_id)
        if self._values.pop(key, None) is None:
            return False
        idx = bisect_left(self._keys, key)
        del self._keys[idx]
        return True

    def get(self, sort_key: str, contact_id: str) -> V | None:
        return self._values.get((sort_key, contact_id))

    def values(self) -> list[V]:
        return [self._values[k] for k in self._keys]

    def range(self, start: str, end: str) -> list[V]:
        """
        Values whose sort key `k` satisfies `start <= k <= end + MAX_CHAR`, ascending.
        An inverted range (`start > end`) is empty.
        """
        if start > end:
            return []
        upper = end + MAX_CHAR
        # (s,) sorts before every (s, id); (upper + "\0",) sorts after every (k, id) with k <= upper.
        lo = bisect_left(self._keys, (start,))
        hi = bisect_left(self._keys, (upper + "\0",))
        return [self._values[k] for k in self._keys[lo:hi]]

    def keys(self) -> list[IndexKey]:
        return list(self._keys)

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._keys)


# --- Module Notes -----------------------------------------------------------
# Inserts shift the key list (O(n) memmove); the index is sized for small entity sets
# where range scans and sorted traversal dominate.
