"""
Itinerary Builder port interface.

Defines the abstract contract for turning raw legs into an itinerary
and walking it into an ordered path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from src.itinerary.models import Itinerary


class ItineraryBuilder(ABC):
    """
    Abstract interface for itinerary reconstruction algorithms.

    Implementations must be stateless: every call works only on the
    legs it receives, so a single instance can serve concurrent requests.

    Implementations:
    - ToggleItineraryBuilder: Cancel-on-repeat endpoint detection
    """

    @abstractmethod
    def build(self, legs: Sequence[Sequence[str]]) -> Itinerary:
        """
        Build an itinerary from raw legs.

        Args:
            legs: Sequence of legs, each expected to be [origin, destination].

        Returns:
            Validated Itinerary.

        Raises:
            ItineraryError: If the legs do not form a single simple path.
        """
        ...

    @abstractmethod
    def walk(self, itinerary: Itinerary) -> List[str]:
        """
        Produce the ordered list of airports from source to destination.

        Raises:
            PathError: If the next-hop chain is broken or cyclic.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
