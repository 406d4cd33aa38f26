"""
Itinerary construction from an unordered set of legs.

Endpoints are found with a toggle pass: every airport code is
inserted on first sight and removed on the next, so interior
stops (one arrival plus one departure) cancel out and only the
overall source and destination survive. The toggle pass alone
cannot see loops detached from the chain, so the built itinerary
is walked once to confirm that every leg lies on a single path.
"""

from typing import Dict, List, Sequence

from .exceptions import (
    AmbiguousDestinationError,
    AmbiguousSourceError,
    DestinationNotFoundError,
    DisconnectedLegsError,
    SourceNotFoundError,
)
from .models import EndpointRoles, Itinerary
from .validation import validate_leg
from .walker import walk_path

ORIGIN_ROLE = 0
DESTINATION_ROLE = 1


def _toggle(roles: Dict[str, int], code: str, role: int) -> None:
    if code in roles:
        del roles[code]
    else:
        roles[code] = role


def _collect(legs: Sequence[Sequence[str]]) -> tuple[Dict[str, str], Dict[str, int]]:
    """
    Single pass over the legs building both the next-hop and role maps.

    Legs are validated in input order and the first failure is raised.
    """
    next_hop: Dict[str, str] = {}
    roles: Dict[str, int] = {}

    for leg in legs:
        origin, destination = validate_leg(leg)

        # Repeated origins: last write wins
        next_hop[origin] = destination

        _toggle(roles, origin, ORIGIN_ROLE)
        _toggle(roles, destination, DESTINATION_ROLE)

    return next_hop, roles


def find_endpoints(legs: Sequence[Sequence[str]]) -> EndpointRoles:
    """
    Run the toggle pass and report the surviving airports by role.

    Args:
        legs: Sequence of (origin, destination) legs.

    Returns:
        EndpointRoles with sorted origin and destination survivors.

    Raises:
        InvalidLegError: If a leg is not a pair.
        InvalidAirportCodeError: If a code is empty.
    """
    _, roles = _collect(legs)
    return _roles_to_endpoints(roles)


def _roles_to_endpoints(roles: Dict[str, int]) -> EndpointRoles:
    origins = sorted(code for code, role in roles.items() if role == ORIGIN_ROLE)
    destinations = sorted(code for code, role in roles.items() if role == DESTINATION_ROLE)
    return EndpointRoles(origins=tuple(origins), destinations=tuple(destinations))


def resolve_endpoints(endpoints: EndpointRoles) -> tuple[str, str]:
    """
    Pick the single source and destination from the toggle survivors.

    Missing endpoints are reported before ambiguous ones.

    Raises:
        SourceNotFoundError: If no origin survived.
        DestinationNotFoundError: If no destination survived.
        AmbiguousSourceError: If several origins survived.
        AmbiguousDestinationError: If several destinations survived.
    """
    if not endpoints.origins:
        raise SourceNotFoundError()
    if not endpoints.destinations:
        raise DestinationNotFoundError()

    if len(endpoints.origins) > 1:
        raise AmbiguousSourceError(endpoints.origins)
    if len(endpoints.destinations) > 1:
        raise AmbiguousDestinationError(endpoints.destinations)

    return endpoints.origins[0], endpoints.destinations[0]


def check_single_path(itinerary: Itinerary, num_legs: int) -> List[str]:
    """
    Confirm that every leg lies on the path from source to destination.

    Args:
        itinerary: Itinerary with resolved endpoints.
        num_legs: Number of legs the itinerary was built from.

    Returns:
        The ordered path of airports.

    Raises:
        DestinationNotFoundForError: If the chain breaks before the destination.
        CycleDetectedError: If the chain revisits an airport.
        DisconnectedLegsError: If some legs are off the path or duplicated.
    """
    path = walk_path(itinerary)

    hops = len(path) - 1
    if hops != num_legs:
        off_path = set(itinerary.next_hop) - set(path[:-1])
        raise DisconnectedLegsError(num_legs - hops, num_legs, off_path)

    return path


def build_itinerary(legs: Sequence[Sequence[str]]) -> Itinerary:
    """
    Build a validated Itinerary from raw legs.

    Args:
        legs: Sequence of legs, each expected to be [origin, destination].

    Returns:
        Itinerary with source, destination and next-hop mapping.

    Raises:
        ItineraryError: First validation, endpoint or path failure encountered.
    """
    next_hop, roles = _collect(legs)
    source, destination = resolve_endpoints(_roles_to_endpoints(roles))

    itinerary = Itinerary(source=source, destination=destination, next_hop=next_hop)
    check_single_path(itinerary, len(legs))

    return itinerary
