"""
In-process request counter.

Each uvicorn worker process holds its own counter, so /metrics reports
the count for the worker that served the scrape.
"""

import threading


class AtomicRequestCounter:
    """
    Monotonic counter, thread-safe for concurrent access within a process.

    Attributes:
        name: Metric name used in the text exposition.
        _value: Current count.
        _lock: Lock for thread-safe access.
    """

    def __init__(self, name: str = "flight_requests_total", initial: int = 0) -> None:
        if initial < 0:
            raise ValueError(f"initial must be >= 0, got {initial}")
        self.name = name
        self._value = initial
        self._lock = threading.Lock()

    def increment(self, amount: int = 1) -> int:
        """Add amount to the counter and return the new value."""
        if amount < 0:
            raise ValueError(f"Counter can only increase, got {amount}")
        with self._lock:
            self._value += amount
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def render(self) -> str:
        """Render the counter in Prometheus text exposition format."""
        value = self.value
        return (
            f"# HELP {self.name} Total number of itinerary requests handled.\n"
            f"# TYPE {self.name} counter\n"
            f"{self.name} {value}\n"
        )
