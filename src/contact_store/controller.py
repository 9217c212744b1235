"""
contact_store.controller

Caller-facing facade over `ContactService`.

Responsibilities:
- Build `Contact` records from raw field values.
- Run each call inside an operation-scoped log context.
- Log request and outcome; log and re-raise failures.
"""

from __future__ import annotations

from contact_store.domain.models import Contact
from contact_store.observability.context import operation_scope
from contact_store.observability.logging import get_logger
from contact_store.services.contact_service import ContactService

log = get_logger(__name__)


class ContactController:
    def __init__(self, *, service: ContactService) -> None:
        if service is None:
            raise ValueError("service must not be None")
        self._service = service

    def create_contact(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> Contact:
        with operation_scope("create", contact_id=contact_id):
            log.info("request")
            contact = Contact(contact_id, first_name, last_name, phone, address)
            try:
                self._service.add_contact(contact)
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded")
            return contact

    def update_contact(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> Contact:
        with operation_scope("update", contact_id=contact_id):
            log.info("request")
            contact = Contact(contact_id, first_name, last_name, phone, address)
            try:
                self._service.update_contact(contact)
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded")
            return contact

    def delete_contact(self, contact_id: str) -> bool:
        with operation_scope("delete", contact_id=contact_id):
            log.info("request")
            try:
                deleted = self._service.delete_contact(contact_id)
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded" if deleted else "not_found")
            return deleted

    def get_contact(self, contact_id: str) -> Contact | None:
        with operation_scope("get", contact_id=contact_id):
            log.info("request")
            try:
                contact = self._service.get_contact(contact_id)
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded" if contact is not None else "not_found")
            return contact

    def list_all_contacts(self) -> list[Contact]:
        with operation_scope("list_all"):
            log.info("request")
            try:
                contacts = self._service.get_all_contacts()
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded", count=len(contacts))
            return contacts

    def list_sorted_contacts(self) -> list[Contact]:
        with operation_scope("list_sorted"):
            log.info("request")
            try:
                contacts = self._service.get_sorted_contacts()
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded", count=len(contacts))
            return contacts

    def find_contacts_in_range(self, start: str, end: str) -> list[Contact]:
        with operation_scope("range", start=start, end=end):
            log.info("request")
            try:
                contacts = self._service.find_contacts_by_last_name(start, end)
            except Exception:
                log.exception("failed")
                raise
            log.info("succeeded", count=len(contacts))
            return contacts

    def check_contact_exists(self, contact_id: str) -> bool:
        with operation_scope("exists", contact_id=contact_id):
            try:
                exists = self._service.contact_exists(contact_id)
            except Exception:
                # Existence checks degrade to "absent" instead of propagating.
                log.exception("failed")
                return False
            log.info("succeeded", exists=exists)
            return exists

    def get_contact_count(self) -> int:
        with operation_scope("count"):
            try:
                count = self._service.get_contact_count()
            except Exception:
                log.exception("failed")
                return 0
            log.info("succeeded", count=count)
            return count


# --- Module Notes -----------------------------------------------------------
# This facade intentionally holds no policy; it delegates to ContactService and
# only adds logging around each call.
