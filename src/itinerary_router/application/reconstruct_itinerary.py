"""
ReconstructItinerary Use Case - Public API for itinerary reconstruction.

This module provides the main entry point for the itinerary engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from src.itinerary_router.adapters.algorithms.toggle_adapter import (
    ToggleItineraryBuilder,
)
from src.itinerary_router.ports.itinerary_builder import ItineraryBuilder
from src.itinerary_router.schemas.result import AssemblyResult
from src.itinerary_router.services.response_assembler_service import (
    ResponseAssemblerService,
)

logger = logging.getLogger(__name__)


class ReconstructItinerary:
    """
    Public API for reconstructing a trip from unordered legs.

    Example usage:
        >>> reconstructor = ReconstructItinerary()
        >>> result = reconstructor.reconstruct(
        ...     legs=[["EWR", "IND"], ["SFO", "EWR"]],
        ...     full_path=True,
        ... )
        >>> result.source, result.destination, result.path
        ('SFO', 'IND', ('SFO', 'EWR', 'IND'))

    Attributes:
        _service: Underlying ResponseAssemblerService.
    """

    def __init__(self, builder: Optional[ItineraryBuilder] = None) -> None:
        """
        Initialize with an optional custom algorithm.

        Args:
            builder: Custom algorithm. If None, uses ToggleItineraryBuilder.
        """
        self._builder = builder if builder is not None else ToggleItineraryBuilder()
        self._service = ResponseAssemblerService(builder=self._builder)

        logger.info(
            "ReconstructItinerary initialized with %s algorithm",
            self._builder.name,
        )

    def reconstruct(
        self,
        legs: Sequence[Sequence[str]],
        full_path: bool = False,
    ) -> AssemblyResult:
        """
        Reconstruct the itinerary described by the legs.

        Args:
            legs: Unordered legs, each [origin, destination].
            full_path: If True, include the ordered path of airports.

        Returns:
            ItinerarySummary or ItineraryFailure.
        """
        return self._service.assemble(legs, full_path=full_path)

    @property
    def algorithm_name(self) -> str:
        return self._service.algorithm_name
