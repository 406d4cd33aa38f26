"""
Algorithm adapters for itinerary reconstruction.
"""

from src.itinerary_router.adapters.algorithms.toggle_adapter import (
    ToggleItineraryBuilder,
)

__all__ = ["ToggleItineraryBuilder"]
