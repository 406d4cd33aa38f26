"""
Input validation for the itinerary module.

Provides validation functions that check legs before they are
folded into an itinerary, ensuring fail-fast behavior with clear
error messages.
"""

from typing import Sequence, Tuple

from .exceptions import InvalidAirportCodeError, InvalidLegError

# Number of airport codes in a single leg (origin, destination)
LEG_SIZE: int = 2


def validate_leg_shape(leg: Sequence[str]) -> Tuple[str, str]:
    """
    Validate that a leg is an (origin, destination) pair.

    Args:
        leg: Sequence of airport codes.

    Returns:
        The (origin, destination) tuple.

    Raises:
        InvalidLegError: If the leg does not hold exactly two codes.
    """
    if len(leg) != LEG_SIZE:
        raise InvalidLegError(leg)

    return leg[0], leg[1]


def validate_airport_code(code: str) -> None:
    """
    Validate a single airport code.

    Args:
        code: Airport code to validate.

    Raises:
        InvalidAirportCodeError: If the code is empty.
    """
    if not code:
        raise InvalidAirportCodeError(code)


def validate_leg(leg: Sequence[str]) -> Tuple[str, str]:
    """
    Validate a leg: shape first, then both airport codes.

    Args:
        leg: Sequence of airport codes.

    Returns:
        The (origin, destination) tuple.

    Raises:
        InvalidLegError: If the leg does not hold exactly two codes.
        InvalidAirportCodeError: If either code is empty.
    """
    origin, destination = validate_leg_shape(leg)
    validate_airport_code(origin)
    validate_airport_code(destination)
    return origin, destination
