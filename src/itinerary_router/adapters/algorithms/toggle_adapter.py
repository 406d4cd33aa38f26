"""
Toggle Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the itinerary module behind the ItineraryBuilder port.
"""

import logging
from typing import List, Sequence

from src.itinerary.builder import build_itinerary
from src.itinerary.models import Itinerary
from src.itinerary.walker import walk_path

from src.itinerary_router.ports.itinerary_builder import ItineraryBuilder

logger = logging.getLogger(__name__)


class ToggleItineraryBuilder(ItineraryBuilder):
    """
    Adapter for the itinerary module.

    Source and destination are found by toggling every airport code
    in and out of a role map; the path is walked from the next-hop
    mapping with a hop bound.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "toggle"

    def build(self, legs: Sequence[Sequence[str]]) -> Itinerary:
        itinerary = build_itinerary(legs)
        logger.debug(
            "Built itinerary %s -> %s from %d legs",
            itinerary.source,
            itinerary.destination,
            len(legs),
        )
        return itinerary

    def walk(self, itinerary: Itinerary) -> List[str]:
        return walk_path(itinerary)
