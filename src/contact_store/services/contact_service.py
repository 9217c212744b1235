"""
contact_store.services.contact_service

Contact lifecycle service.

Responsibilities:
- Validate contacts before writes.
- Enforce create-only / update-only semantics on top of the repository's upsert.
- Expose reads, sorted scans and last-name range queries to the controller.
"""

from __future__ import annotations

from contact_store.domain.models import Contact
from contact_store.errors import ContactAlreadyExistsError, ContactNotFoundError
from contact_store.observability.logging import get_logger
from contact_store.services.validation import ContactValidator
from contact_store.store.contacts import InMemoryContactRepo

log = get_logger(__name__)


class ContactService:
    def __init__(
        self,
        *,
        repository: InMemoryContactRepo,
        validator: ContactValidator | None = None,
    ) -> None:
        self._repository = repository
        self._validator = validator or ContactValidator()

    def add_contact(self, contact: Contact) -> None:
        self._validator.validate_contact(contact)
        if self._repository.exists(contact.contact_id):
            raise ContactAlreadyExistsError(contact.contact_id)
        self._repository.save(contact)
        log.info("contact_added", contact_id=contact.contact_id)

    def update_contact(self, contact: Contact) -> None:
        self._validator.validate_contact(contact)
        if not self._repository.exists(contact.contact_id):
            raise ContactNotFoundError(contact.contact_id)
        self._repository.save(contact)
        log.info("contact_updated", contact_id=contact.contact_id)

    def delete_contact(self, contact_id: str | None) -> bool:
        self._validator.validate_contact_id(contact_id)
        deleted = self._repository.delete(contact_id)
        log.info("contact_delete", contact_id=contact_id, deleted=deleted)
        return deleted

    def get_contact(self, contact_id: str | None) -> Contact | None:
        self._validator.validate_contact_id(contact_id)
        return self._repository.find_by_id(contact_id)

    def get_all_contacts(self) -> list[Contact]:
        return self._repository.find_all()

    def get_sorted_contacts(self) -> list[Contact]:
        return self._repository.find_all_sorted()

    def find_contacts_by_last_name(self, start: str, end: str) -> list[Contact]:
        return self._repository.find_in_name_range(start, end)

    def contact_exists(self, contact_id: str | None) -> bool:
        if not contact_id:
            return False
        return self._repository.exists(contact_id)

    def get_contact_count(self) -> int:
        return self._repository.size()


# --- Module Notes -----------------------------------------------------------
# The repository never checks for duplicates; that policy lives here so other callers
# (bulk loaders, benchmarks) can upsert directly.
