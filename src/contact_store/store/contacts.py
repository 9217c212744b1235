"""
contact_store.store.contacts

Multi-index repository for `Contact` records.

Responsibilities:
- Keep the primary index (id -> contact), the ordered sort index and the
  recency cache consistent under save/delete/clear.
- Serve point lookups through the cache, falling back to the primary index.
- Serve full, sorted and name-range scans.
"""

from __future__ import annotations

from contact_store.domain.models import Contact
from contact_store.observability.logging import get_logger
from contact_store.store.lru import LRUCache
from contact_store.store.sort_index import SortIndex

log = get_logger(__name__)

DEFAULT_CACHE_CAPACITY = 50


class InMemoryContactRepo:
    """
    Three structures, one owner:
    - `_by_id`: primary index, O(1) lookup/insert/delete
    - `_by_sort_key`: ordered by (sort_key, contact_id), O(log n + k) range scans
    - `_cache`: bounded LRU of recently read contacts

    Invariants kept by every mutating call:
    - each id in `_by_id` has exactly one sort index entry, under its current sort key
    - cache keys are a subset of `_by_id` keys
    - the cache never holds more than `cache_capacity` entries
    """

    def __init__(self, *, cache_capacity: int = DEFAULT_CACHE_CAPACITY) -> None:
        self._by_id: dict[str, Contact] = {}
        self._by_sort_key: SortIndex[Contact] = SortIndex()
        self._cache: LRUCache[str, Contact] = LRUCache(
            cache_capacity, on_evict=self._log_eviction
        )
        log.debug("repository_initialized", cache_capacity=cache_capacity)

    def save(self, contact: Contact | None) -> None:
        """
        Insert a new contact or replace the existing one with the same id.
        Field contents are not validated here.
        """
        if contact is None:
            raise ValueError("contact must not be None")

        contact_id = contact.contact_id
        previous = self._by_id.get(contact_id)
        is_new = previous is None

        if previous is not None:
            # The sort-defining fields may have changed; drop the old entry first.
            self._by_sort_key.remove(previous.sort_key, contact_id)

        self._by_id[contact_id] = contact
        self._by_sort_key.put(contact.sort_key, contact_id, contact)

        if not is_new:
            # Invalidate rather than refresh; the next read repopulates the cache.
            self._cache.pop(contact_id)

        log.debug("contact_saved", contact_id=contact_id, created=is_new)

    def find_by_id(self, contact_id: str | None) -> Contact | None:
        if contact_id is None:
            return None

        cached = self._cache.get(contact_id)
        if cached is not None:
            log.debug("cache_hit", contact_id=contact_id)
            return cached

        log.debug("cache_miss", contact_id=contact_id)
        contact = self._by_id.get(contact_id)
        if contact is not None:
            self._cache.put(contact_id, contact)
        return contact

    def find_all(self) -> list[Contact]:
        return list(self._by_id.values())

    def find_all_sorted(self) -> list[Contact]:
        """All contacts ascending by sort key ("last, first"), ties broken by id."""
        return self._by_sort_key.values()

    def find_in_name_range(self, start: str, end: str) -> list[Contact]:
        """
        Contacts whose sort key lies in [start, end], where `end` also matches any
        key it prefixes: ("Doe", "Doe") returns both "Doe, Jane" and "Doe, John".
        """
        log.debug("range_query", start=start, end=end)
        return self._by_sort_key.range(start, end)

    def delete(self, contact_id: str | None) -> bool:
        if contact_id is None:
            return False

        contact = self._by_id.pop(contact_id, None)
        if contact is None:
            log.debug("contact_not_found_for_delete", contact_id=contact_id)
            return False

        self._by_sort_key.remove(contact.sort_key, contact_id)
        self._cache.pop(contact_id)
        log.debug("contact_deleted", contact_id=contact_id)
        return True

    def exists(self, contact_id: str | None) -> bool:
        # Primary index only; leaves cache recency untouched.
        if contact_id is None:
            return False
        return contact_id in self._by_id

    def clear(self) -> None:
        self._by_id.clear()
        self._by_sort_key.clear()
        self._cache.clear()
        log.debug("repository_cleared")

    def size(self) -> int:
        return len(self._by_id)

    def cache_stats(self) -> str:
        return f"Cache size: {len(self._cache)}/{self._cache.capacity} contacts"

    def cache_counters(self) -> dict[str, int]:
        return self._cache.stats()

    def cached_ids(self) -> list[str]:
        """Cache-resident ids, least recently used first."""
        return self._cache.keys()

    def __len__(self) -> int:
        return self.size()

    @staticmethod
    def _log_eviction(contact_id: str, _: Contact) -> None:
        log.debug("cache_evicted", contact_id=contact_id)


# --- Module Notes -----------------------------------------------------------
# Single-threaded by contract: no internal locking. A concurrent caller must wrap each
# logical operation in one critical section so no reader sees the three structures disagree.
