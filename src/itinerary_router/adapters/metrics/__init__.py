"""
Metrics adapters.
"""

from src.itinerary_router.adapters.metrics.atomic_counter import AtomicRequestCounter

__all__ = ["AtomicRequestCounter"]
