"""
Request Counter port interface.

Process-wide monotonic counter incremented once per handled request.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class RequestCounter(Protocol):
    """
    Protocol for request counters.

    All implementations must be safe for concurrent increments.
    """

    name: str

    def increment(self, amount: int = 1) -> int:
        """
        Add to the counter.

        Args:
            amount: Non-negative increment.

        Returns:
            The counter value after the increment.
        """
        ...

    @property
    def value(self) -> int:
        """Current counter value."""
        ...

    def render(self) -> str:
        """Render the counter in Prometheus text exposition format."""
        ...
