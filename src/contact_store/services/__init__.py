"""
contact_store.services

Service-layer package.

Responsibilities:
- Gate writes through field validation.
- Own the "already exists" / "not found" policy on top of the repository.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with a fresh repository per test.
