"""
Port interfaces for the Itinerary Router.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with algorithms and process-wide collaborators.
This follows the Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.itinerary_router.ports.itinerary_builder import ItineraryBuilder
from src.itinerary_router.ports.request_counter import RequestCounter

__all__ = [
    "ItineraryBuilder",
    "RequestCounter",
]
