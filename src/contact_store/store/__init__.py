"""
contact_store.store

In-memory storage package.

Responsibilities:
- Group the LRU cache, the ordered sort index and the multi-index repository.
"""

# Package marker; import directly from submodules.


# --- Module Notes -----------------------------------------------------------
# The repository is the only owner of record lifetime; the cache and sort index
# are never handed out to callers.
