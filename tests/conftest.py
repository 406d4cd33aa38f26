"""Shared fixtures for itinerary tests."""

from typing import Callable, List, Sequence

import pytest


def _legs_from_path(path: Sequence[str]) -> List[List[str]]:
    return [[path[i], path[i + 1]] for i in range(len(path) - 1)]


@pytest.fixture
def legs_from_path() -> Callable[[Sequence[str]], List[List[str]]]:
    """Split an ordered path of airports into its consecutive legs."""
    return _legs_from_path
