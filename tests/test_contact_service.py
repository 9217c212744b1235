"""
tests.test_contact_service

Service-layer policy: validation gate, duplicate and missing-contact errors.
"""

from __future__ import annotations

import pytest

from contact_store.errors import (
    ContactAlreadyExistsError,
    ContactNotFoundError,
    ContactValidationError,
)
from contact_store.services.contact_service import ContactService


@pytest.fixture
def service(repo) -> ContactService:
    return ContactService(repository=repo)


def test_add_then_get(service, make_contact) -> None:
    c = make_contact("1")
    service.add_contact(c)

    assert service.get_contact("1") == c
    assert service.contact_exists("1") is True
    assert service.get_contact_count() == 1


def test_add_duplicate_raises(service, make_contact) -> None:
    service.add_contact(make_contact("1"))
    with pytest.raises(ContactAlreadyExistsError) as exc:
        service.add_contact(make_contact("1", first_name="Other"))

    assert exc.value.contact_id == "1"
    assert service.get_contact("1").first_name == "John"


def test_add_invalid_does_not_write(service, repo, make_contact) -> None:
    with pytest.raises(ContactValidationError):
        service.add_contact(make_contact("1", phone="abc"))
    assert repo.size() == 0


def test_update_existing(service, make_contact) -> None:
    service.add_contact(make_contact("1"))
    assert service.get_contact("1").address == "1 Main St"

    service.update_contact(make_contact("1", address="2 Elm St"))

    assert service.get_contact("1").address == "2 Elm St"


def test_update_missing_raises(service, make_contact) -> None:
    with pytest.raises(ContactNotFoundError):
        service.update_contact(make_contact("404"))


def test_delete(service, make_contact) -> None:
    service.add_contact(make_contact("1"))

    assert service.delete_contact("1") is True
    assert service.delete_contact("1") is False
    with pytest.raises(ContactValidationError):
        service.delete_contact("")


def test_get_contact_requires_id(service) -> None:
    with pytest.raises(ContactValidationError):
        service.get_contact(None)
    assert service.get_contact("missing") is None


def test_contact_exists_handles_empty_ids(service) -> None:
    assert service.contact_exists(None) is False
    assert service.contact_exists("") is False


def test_sorted_and_range_queries(service, make_contact) -> None:
    service.add_contact(make_contact("1", first_name="John", last_name="Doe"))
    service.add_contact(make_contact("2", first_name="Ann", last_name="Smith"))
    service.add_contact(make_contact("3", first_name="Jane", last_name="Doe"))

    assert [c.contact_id for c in service.get_sorted_contacts()] == ["3", "1", "2"]
    assert [c.contact_id for c in service.find_contacts_by_last_name("Doe", "Doe")] == ["3", "1"]
    assert len(service.get_all_contacts()) == 3


# --- Module Notes -----------------------------------------------------------
# Each test gets a fresh repository from conftest.
