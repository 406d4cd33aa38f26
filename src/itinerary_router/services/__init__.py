"""
Domain services for the Itinerary Router.

Services orchestrate the interaction between ports (algorithms)
and domain logic (result transformation).
"""

from src.itinerary_router.services.response_assembler_service import (
    ResponseAssemblerService,
)

__all__ = ["ResponseAssemblerService"]
