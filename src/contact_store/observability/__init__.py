"""
contact_store.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Operation context propagation for consistent log enrichment.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Metrics exporters can be added here without touching repository logic.
