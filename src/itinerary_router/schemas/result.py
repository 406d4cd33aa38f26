"""
Itinerary result schemas.

Defines the output contract of the Response Assembler. Both outcomes
are immutable and carry only what the HTTP boundary needs to render.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ItinerarySummary:
    """
    Successful reconstruction of a trip.

    Attributes:
        source: Overall trip origin airport code.
        destination: Overall trip destination airport code.
        path: Ordered airport codes, present only when requested.
    """

    source: str
    destination: str
    path: Optional[Tuple[str, ...]] = None

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def num_legs(self) -> Optional[int]:
        """Number of legs in the path (None if the path was not computed)."""
        if self.path is None:
            return None
        return len(self.path) - 1


@dataclass(frozen=True)
class ItineraryFailure:
    """
    Failed reconstruction of a trip.

    Attributes:
        message: Human-readable description of the failure.
        kind: Stable failure identifier (e.g. 'SourceNotFound').
    """

    message: str
    kind: str

    @property
    def is_ok(self) -> bool:
        return False


AssemblyResult = Union[ItinerarySummary, ItineraryFailure]
