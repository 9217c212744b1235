"""
contact_store.bench.__main__

Entrypoint for running the benchmark via `python -m contact_store.bench`.

Responsibilities:
- Load settings and configure logging.
- Run the benchmark and emit one structured event per dataset size.
"""

from __future__ import annotations

from contact_store.bench.runner import run
from contact_store.observability.logging import configure_logging, get_logger
from contact_store.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        cache_loggers=settings.env != "test",
    )

    for result in run(settings.benchmark_sizes, cache_capacity=settings.cache_capacity):
        log.info(
            "benchmark_result",
            size=result.size,
            list_scan_ns=result.list_scan_ns,
            repo_cold_ns=result.repo_cold_ns,
            repo_warm_ns=result.repo_warm_ns,
            speedup=round(result.speedup, 1),
        )


if __name__ == "__main__":
    main()


# --- Module Notes -----------------------------------------------------------
# Set CONTACT_STORE_BENCHMARK_SIZES='[10, 100]' to shorten a run.
