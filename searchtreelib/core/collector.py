"""Data collection strategies for SearchTreeLib.

DataCollectors are ready-made visitors: callables that receive each value
during a traversal and accumulate a result. The same traversal can collect
different data depending on which collector is passed.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional


class DataCollector(ABC):
    """Abstract base class for data collection strategies.

    A collector is called once per visited value and exposes what it
    gathered through ``result()``.
    """

    @abstractmethod
    def collect(self, value: Any) -> None:
        """Collect data from a visited value.

        Args:
            value: The value being visited
        """
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return the data collected so far."""
        pass

    def __call__(self, value: Any) -> None:
        self.collect(value)


class ValueCollector(DataCollector):
    """Collects values in the order they are visited."""

    def __init__(self):
        self.values: List[Any] = []

    def collect(self, value: Any) -> None:
        self.values.append(value)

    def result(self) -> List[Any]:
        return self.values


class CountCollector(DataCollector):
    """Counts visited values."""

    def __init__(self):
        self.count = 0

    def collect(self, value: Any) -> None:
        self.count += 1

    def result(self) -> int:
        return self.count


class SumCollector(DataCollector):
    """Sums visited values.

    Values must support ``+`` with the start value (0 by default).
    """

    def __init__(self, start: Any = 0):
        self.total = start

    def collect(self, value: Any) -> None:
        self.total = self.total + value

    def result(self) -> Any:
        return self.total


class MaxCollector(DataCollector):
    """Tracks the largest visited value.

    Uses only ``<``, the same comparison the tree relies on. Of several equal
    maxima, the first one visited is kept.
    """

    def __init__(self):
        self.maximum: Optional[Any] = None
        self._seen = False

    def collect(self, value: Any) -> None:
        if not self._seen or self.maximum < value:
            self.maximum = value
            self._seen = True

    def result(self) -> Optional[Any]:
        """Return the maximum, or None if nothing was visited."""
        return self.maximum


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Any], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(value) -> Any; each return value is kept
        """
        self.collect_func = collect_func
        self.results: List[Any] = []

    def collect(self, value: Any) -> None:
        self.results.append(self.collect_func(value))

    def result(self) -> List[Any]:
        return self.results
