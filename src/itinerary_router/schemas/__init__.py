"""
Schema definitions for the Itinerary Router.

Immutable dataclasses as the contract between the assembler and the
HTTP boundary.
"""

from .result import AssemblyResult, ItineraryFailure, ItinerarySummary

__all__ = [
    "AssemblyResult",
    "ItineraryFailure",
    "ItinerarySummary",
]
