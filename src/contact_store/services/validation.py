"""
contact_store.services.validation

Field rules for contacts.

Responsibilities:
- Validate a `Contact` before it is written.
- Validate bare contact ids for lookups and deletes.
"""

from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contact_store.domain.models import Contact
from contact_store.errors import ContactValidationError
from contact_store.observability.logging import get_logger

log = get_logger(__name__)


class ContactFields(BaseModel):
    model_config = ConfigDict(strict=True, frozen=True)

    contact_id: str = Field(min_length=1, max_length=10)
    first_name: str = Field(min_length=1, max_length=10)
    last_name: str = Field(min_length=1, max_length=10)
    phone: str = Field(pattern=r"^[0-9]{10}$")
    address: str = Field(min_length=1, max_length=30)


class ContactValidator:
    """Pass/fail gate; raises `ContactValidationError` naming the first failing field."""

    def validate_contact(self, contact: Contact | None) -> None:
        if contact is None:
            raise ContactValidationError("contact", "contact must not be None")

        try:
            ContactFields(**asdict(contact))
        except ValidationError as e:
            err = e.errors()[0]
            field = str(err["loc"][0]) if err["loc"] else "contact"
            raise ContactValidationError(field, err["msg"]) from e

        log.debug("contact_validation_passed", contact_id=contact.contact_id)

    def validate_contact_id(self, contact_id: str | None) -> None:
        if not contact_id:
            raise ContactValidationError("contact_id", "contact id must not be empty")


# --- Module Notes -----------------------------------------------------------
# The pydantic model is only the rule set; the stored record stays a plain dataclass.
