"""
contact_store.store.lru

Bounded least-recently-used cache.

Responsibilities:
- Keep at most `capacity` entries, ordered from least to most recently used.
- Promote entries on access and evict the eldest on overflow.
- Fire an eviction callback and keep hit/miss/eviction counters.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    OrderedDict-backed LRU map. The first entry is the least recently used one.
    """

    def __init__(self, capacity: int, *, on_evict: Callable[[K, V], None] | None = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._on_evict = on_evict
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: K) -> V | None:
        """Return the value for `key` and mark it most recently used, or None."""
        if key not in self._entries:
            self._misses += 1
            return None
        self._entries.move_to_end(key)
        self._hits += 1
        return self._entries[key]

    def peek(self, key: K) -> V | None:
        # No recency side effect.
        return self._entries.get(key)

    def put(self, key: K, value: V) -> None:
        """Insert or overwrite `key` as most recently used, evicting the eldest on overflow."""
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = value
        if len(self._entries) > self._capacity:
            old_key, old_value = self._entries.popitem(last=False)
            self._evictions += 1
            if self._on_evict is not None:
                self._on_evict(old_key, old_value)

    def pop(self, key: K) -> V | None:
        return self._entries.pop(key, None)

    def keys(self) -> list[K]:
        return list(self._entries.keys())

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def stats(self) -> dict[str, int]:
        return {
            "size": len(self._entries),
            "capacity": self._capacity,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# --- Module Notes -----------------------------------------------------------
# Eviction is a synchronous side effect of `put`; there is no background sweep.
