"""
contact_store.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for the composition root.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, one object injected at composition time.
    Variables are read with the `CONTACT_STORE_` prefix (e.g. CONTACT_STORE_CACHE_CAPACITY).
    """

    model_config = SettingsConfigDict(env_prefix="CONTACT_STORE_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "contact-store"
    log_level: str = "INFO"

    # Recency cache
    cache_capacity: int = Field(default=50, ge=1)

    # Benchmark harness (dataset sizes, in contacts)
    benchmark_sizes: list[int] = Field(default_factory=lambda: [100, 500, 1000, 5000])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars on every call.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of going through `get_settings`,
# so the cached instance never leaks between scenarios.
