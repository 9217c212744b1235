"""
contact_store.errors

Domain-specific exceptions raised above the repository layer.

Responsibilities:
- Signal validation failures with the offending field.
- Signal the "already exists" / "not found" policy owned by the service layer.
"""

from __future__ import annotations


class ContactStoreError(Exception):
    """Base class for contact store errors."""


class ContactValidationError(ContactStoreError, ValueError):
    """
    Raised when a contact (or contact id) fails a field rule.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ContactAlreadyExistsError(ContactStoreError, ValueError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(f"contact already exists with id: {contact_id}")
        self.contact_id = contact_id


class ContactNotFoundError(ContactStoreError, LookupError):
    def __init__(self, contact_id: str) -> None:
        super().__init__(f"contact not found with id: {contact_id}")
        self.contact_id = contact_id


# --- Module Notes -----------------------------------------------------------
# The repository never raises these: absence there is a sentinel return (None/False),
# and the service layer decides whether absence is exceptional.
