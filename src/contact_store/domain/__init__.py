"""
contact_store.domain

Domain package.

Responsibilities:
- Define the record types stored by the repository.
"""

from contact_store.domain.models import Contact

__all__ = ["Contact"]


# --- Module Notes -----------------------------------------------------------
# Domain types carry no storage or validation logic; both live one layer out.
