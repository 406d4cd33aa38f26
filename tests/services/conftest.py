"""Pytest configuration for service tests."""

from unittest.mock import MagicMock

import pytest

from src.itinerary.models import Itinerary
from src.itinerary_router.ports.itinerary_builder import ItineraryBuilder


@pytest.fixture
def two_leg_legs() -> list[list[str]]:
    """Unordered legs for SFO -> EWR -> IND."""
    return [["EWR", "IND"], ["SFO", "EWR"]]


@pytest.fixture
def mock_builder() -> MagicMock:
    """Create a mock ItineraryBuilder returning a fixed two-leg itinerary."""
    builder = MagicMock(spec=ItineraryBuilder)
    builder.name = "mock"
    builder.build.return_value = Itinerary(
        source="SFO",
        destination="IND",
        next_hop={"SFO": "EWR", "EWR": "IND"},
    )
    builder.walk.return_value = ["SFO", "EWR", "IND"]
    return builder
