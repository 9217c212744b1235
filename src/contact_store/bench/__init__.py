"""
contact_store.bench

Benchmark harness package.

Responsibilities:
- Compare linear-scan lookups with the indexed repository across dataset sizes.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Run via `python -m contact_store.bench` or the `contact-store-bench` console script.
