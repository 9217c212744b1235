"""
contact_store.app

Composition root for the contact store.

Responsibilities:
- Configure logging once.
- Construct the repository, service and controller explicitly (no global instance).
"""

from __future__ import annotations

from contact_store.controller import ContactController
from contact_store.observability.logging import configure_logging, get_logger
from contact_store.services.contact_service import ContactService
from contact_store.settings import Settings
from contact_store.store.contacts import InMemoryContactRepo

log = get_logger(__name__)


def build_repository(settings: Settings) -> InMemoryContactRepo:
    return InMemoryContactRepo(cache_capacity=settings.cache_capacity)


def build_controller(
    *,
    settings: Settings,
    repository: InMemoryContactRepo | None = None,
) -> ContactController:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        cache_loggers=settings.env != "test",
    )

    # Callers that need direct repository access (tests, loaders) can pass their own.
    repo = repository if repository is not None else build_repository(settings)
    service = ContactService(repository=repo)
    log.info("startup", env=settings.env, cache_capacity=settings.cache_capacity)
    return ContactController(service=service)


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: wiring stays here; behavior stays in the
# store/services/controller layers.
