"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide a fresh repository (and a contact factory) per test.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest
import structlog

from contact_store.domain.models import Contact
from contact_store.store.contacts import InMemoryContactRepo

ContactFactory = Callable[..., Contact]


@pytest.fixture(autouse=True)
def _reset_structlog():
    # Tests that go through the composition root reconfigure structlog globally.
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(logging.WARNING)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def make_contact() -> ContactFactory:
    def _make(
        contact_id: str = "1",
        first_name: str = "John",
        last_name: str = "Doe",
        phone: str = "5551234567",
        address: str = "1 Main St",
    ) -> Contact:
        return Contact(contact_id, first_name, last_name, phone, address)

    return _make


@pytest.fixture
def repo() -> InMemoryContactRepo:
    return InMemoryContactRepo()


# --- Module Notes -----------------------------------------------------------
# Repositories are constructed per test; there is no shared instance to reset.
