"""
Custom exceptions for the itinerary module.

Provides a hierarchy of exceptions for clear error handling
of itinerary reconstruction. Every exception carries a stable
``kind`` identifier which the HTTP layer surfaces to clients.
"""

from typing import Iterable, Sequence


class ItineraryError(Exception):
    """Base exception for all itinerary module errors."""

    kind: str = "ItineraryError"


class LegValidationError(ItineraryError):
    """Base exception for malformed legs."""

    pass


class InvalidLegError(LegValidationError):
    """Raised when a leg is not exactly an (origin, destination) pair."""

    kind = "InvalidLeg"

    def __init__(self, leg: Sequence[str]) -> None:
        self.leg = list(leg)
        message = f"Invalid leg {self.leg}: expected exactly 2 airport codes, got {len(self.leg)}"
        super().__init__(message)


class InvalidAirportCodeError(LegValidationError):
    """Raised when an airport code is empty."""

    kind = "InvalidAirportCode"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Invalid airport code: {code!r}")


class EndpointError(ItineraryError):
    """Base exception for source/destination resolution failures."""

    pass


class SourceNotFoundError(EndpointError):
    """Raised when no airport qualifies as the overall trip source."""

    kind = "SourceNotFound"

    def __init__(self, message: str = "Source airport not found") -> None:
        super().__init__(message)


class DestinationNotFoundError(EndpointError):
    """Raised when no airport qualifies as the overall trip destination."""

    kind = "DestinationNotFound"

    def __init__(self, message: str = "Destination airport not found") -> None:
        super().__init__(message)


class AmbiguousSourceError(EndpointError):
    """Raised when more than one airport qualifies as the trip source."""

    kind = "AmbiguousSource"

    def __init__(self, candidates: Iterable[str]) -> None:
        self.candidates = tuple(sorted(candidates))
        codes_str = ", ".join(self.candidates)
        super().__init__(f"Ambiguous source airport, candidates: {codes_str}")


class AmbiguousDestinationError(EndpointError):
    """Raised when more than one airport qualifies as the trip destination."""

    kind = "AmbiguousDestination"

    def __init__(self, candidates: Iterable[str]) -> None:
        self.candidates = tuple(sorted(candidates))
        codes_str = ", ".join(self.candidates)
        super().__init__(f"Ambiguous destination airport, candidates: {codes_str}")


class PathError(ItineraryError):
    """Base exception for path reconstruction failures."""

    pass


class DestinationNotFoundForError(PathError):
    """Raised when the chain of legs breaks before reaching the destination."""

    kind = "DestinationNotFoundFor"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Destination not found for airport '{code}'")


class DisconnectedLegsError(PathError):
    """Raised when some legs are not part of the path from source to destination."""

    kind = "DisconnectedLegs"

    def __init__(self, unused: int, total: int, codes: Iterable[str] = ()) -> None:
        self.unused = unused
        self.total = total
        self.codes = tuple(sorted(codes))
        message = f"{unused} of {total} legs are not on the path from source to destination"
        if self.codes:
            message += f" (departing from: {', '.join(self.codes)})"
        super().__init__(message)


class CycleDetectedError(PathError):
    """Raised when the path walk revisits an airport without reaching the destination."""

    kind = "CycleDetected"

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Cycle detected: airport '{code}' visited twice")
