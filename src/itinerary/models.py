from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class Itinerary:
    """
    Validated trip built from a set of legs.

    Tracks:
    - Overall source airport (only ever an origin)
    - Overall destination airport (only ever a destination)
    - Next-hop mapping from every non-terminal airport to its successor

    The mapping is wrapped in a read-only proxy so a built itinerary
    cannot be mutated after construction.
    """
    source: str
    destination: str
    next_hop: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.next_hop, MappingProxyType):
            object.__setattr__(self, "next_hop", MappingProxyType(dict(self.next_hop)))


@dataclass(frozen=True)
class EndpointRoles:
    """
    Airports left over after toggling every leg's codes.

    A valid chain leaves exactly one origin and one destination.
    """
    origins: Tuple[str, ...]
    destinations: Tuple[str, ...]
