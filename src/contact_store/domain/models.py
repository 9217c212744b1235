"""
contact_store.domain.models

Contact record.

Responsibilities:
- Define the immutable `Contact` value stored by the repository.
- Derive the sort key used by the ordered index.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Contact:
    """
    A single contact. Immutable: an update replaces the whole record.
    """

    contact_id: str
    first_name: str
    last_name: str
    phone: str
    address: str

    @property
    def sort_key(self) -> str:
        # "family, given" ordering, e.g. "Doe, Jane".
        return f"{self.last_name}, {self.first_name}"


# --- Module Notes -----------------------------------------------------------
# `sort_key` is not unique; the sort index pairs it with `contact_id`.
