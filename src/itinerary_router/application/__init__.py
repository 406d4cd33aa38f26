"""
Application layer for the Itinerary Router.

This layer provides the public API for the itinerary engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.itinerary_router.application.reconstruct_itinerary import ReconstructItinerary

__all__ = ["ReconstructItinerary"]
