"""
contact_store.observability.context

Operation-scoped logging context.

Responsibilities:
- Generate an operation id for each controller call.
- Bind operation metadata into structlog contextvars for the duration of the call.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


@contextmanager
def operation_scope(operation: str, **fields: Any) -> Iterator[str]:
    """
    Bind `operation`, a fresh `operation_id` and any extra fields onto every log line
    emitted inside the block. Previous bindings are restored on exit, so nested scopes
    do not clobber the outer one.
    """

    operation_id = str(uuid.uuid4())
    with structlog.contextvars.bound_contextvars(
        operation=operation,
        operation_id=operation_id,
        **fields,
    ):
        yield operation_id


# --- Module Notes -----------------------------------------------------------
# This complements `observability.logging.configure_logging` by ensuring operation
# metadata is present on every log line without explicit parameter threading.
