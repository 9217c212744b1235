"""
contact_store.bench.runner

Lookup benchmark.

Responsibilities:
- Build synthetic datasets of a given size.
- Time a worst-case linear scan against cold and warm repository lookups.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass

from contact_store.domain.models import Contact
from contact_store.store.contacts import InMemoryContactRepo


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    size: int
    list_scan_ns: int
    repo_cold_ns: int
    repo_warm_ns: int

    @property
    def speedup(self) -> float:
        # Linear scan vs. cached repository hit.
        return self.list_scan_ns / max(self.repo_warm_ns, 1)


def make_contacts(size: int) -> list[Contact]:
    return [
        Contact(str(i), f"F{i}", "Last", "1234567890", "123 Main St")
        for i in range(size)
    ]


def run_one(size: int, *, cache_capacity: int) -> BenchmarkResult:
    if size < 1:
        raise ValueError("size must be at least 1")

    contacts = make_contacts(size)
    repo = InMemoryContactRepo(cache_capacity=cache_capacity)
    for c in contacts:
        repo.save(c)

    # The last id is the worst case for a linear scan.
    target = str(size - 1)

    started = time.perf_counter_ns()
    found = next((c for c in contacts if c.contact_id == target), None)
    list_scan_ns = time.perf_counter_ns() - started
    if found is None:
        raise RuntimeError(f"contact {target} missing from the scan list")

    started = time.perf_counter_ns()
    repo.find_by_id(target)
    repo_cold_ns = time.perf_counter_ns() - started

    started = time.perf_counter_ns()
    repo.find_by_id(target)
    repo_warm_ns = time.perf_counter_ns() - started

    return BenchmarkResult(
        size=size,
        list_scan_ns=list_scan_ns,
        repo_cold_ns=repo_cold_ns,
        repo_warm_ns=repo_warm_ns,
    )


def run(sizes: Iterable[int], *, cache_capacity: int) -> list[BenchmarkResult]:
    return [run_one(size, cache_capacity=cache_capacity) for size in sizes]


# --- Module Notes -----------------------------------------------------------
# Single-shot timings are noisy; they show the order-of-growth difference, not precise costs.
