"""
Response Assembler Service - Domain orchestrator for itinerary requests.

Coordinates the interaction between:
- ItineraryBuilder (algorithm adapter)
- ItinerarySummary / ItineraryFailure (result schemas)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Sequence

from src.itinerary.exceptions import ItineraryError
from src.itinerary_router.schemas.result import (
    AssemblyResult,
    ItineraryFailure,
    ItinerarySummary,
)

if TYPE_CHECKING:
    from src.itinerary_router.ports.itinerary_builder import ItineraryBuilder

logger = logging.getLogger(__name__)


class ResponseAssemblerService:
    """
    Domain service turning raw legs into a result envelope.

    Orchestrates the reconstruction:
    1. Builds the itinerary (source, destination, next-hop mapping)
    2. Walks the full path when requested
    3. Converts any ItineraryError into an ItineraryFailure

    Domain failures never escape this service; anything that is not an
    ItineraryError propagates to the caller.

    This service is stateless and thread-safe.

    Attributes:
        _builder: Algorithm adapter for itinerary reconstruction.
    """

    def __init__(self, builder: ItineraryBuilder) -> None:
        """
        Initialize the assembler.

        Args:
            builder: Algorithm adapter (e.g., ToggleItineraryBuilder).
        """
        self._builder = builder

    def assemble(
        self,
        legs: Sequence[Sequence[str]],
        full_path: bool = False,
    ) -> AssemblyResult:
        """
        Reconstruct the itinerary described by the legs.

        Args:
            legs: Sequence of legs, each expected to be [origin, destination].
            full_path: If True, include the ordered list of airports.

        Returns:
            ItinerarySummary on success, ItineraryFailure otherwise.
        """
        start_time = time.perf_counter()

        try:
            itinerary = self._builder.build(legs)
            path = tuple(self._builder.walk(itinerary)) if full_path else None
        except ItineraryError as e:
            logger.debug("Itinerary rejected (%s): %s", e.kind, e)
            return ItineraryFailure(message=str(e), kind=e.kind)

        logger.debug(
            "Itinerary assembled: %s -> %s (%d legs, full_path=%s) in %.3fms",
            itinerary.source,
            itinerary.destination,
            len(legs),
            full_path,
            (time.perf_counter() - start_time) * 1000,
        )

        return ItinerarySummary(
            source=itinerary.source,
            destination=itinerary.destination,
            path=path,
        )

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._builder.name
