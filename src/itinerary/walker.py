from typing import List, Set

from .exceptions import CycleDetectedError, DestinationNotFoundForError
from .models import Itinerary


def walk_path(itinerary: Itinerary) -> List[str]:
    """
    Reconstruct the ordered path from source to destination.

    Follows the next-hop mapping starting at the source. Every step
    reaches an airport not yet on the path, so the walk makes at most
    ``len(itinerary.next_hop)`` hops before it ends or fails.

    Returns:
        path: ordered list of airport codes, source and destination inclusive

    Raises:
        DestinationNotFoundForError: If the chain breaks before the destination.
        CycleDetectedError: If an airport is reached twice.
    """
    path: List[str] = [itinerary.source]
    seen: Set[str] = {itinerary.source}

    current = itinerary.source
    while current != itinerary.destination:
        nxt = itinerary.next_hop.get(current)
        if nxt is None:
            raise DestinationNotFoundForError(current)
        if nxt in seen:
            raise CycleDetectedError(nxt)

        path.append(nxt)
        seen.add(nxt)
        current = nxt

    return path
