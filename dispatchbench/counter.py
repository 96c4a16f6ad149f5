"""
Counter

Capability interface over a single integer and its only implementation.
The benchmark holds the counter through ICounter so every call is resolved
on the instance at run time.
"""

from abc import ABC, abstractmethod


class ICounter(ABC):
    """
    Port for a resettable, monotonically increasing counter.
    """

    @abstractmethod
    def increment(self) -> None:
        """Add one to the counter."""
        pass

    @abstractmethod
    def read(self) -> int:
        """Return the current value."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Set the counter back to zero."""
        pass


class Counter(ICounter):

    def __init__(self) -> None:
        self._num = 0

    def increment(self) -> None:
        self._num += 1

    def read(self) -> int:
        return self._num

    def reset(self) -> None:
        self._num = 0

    def __repr__(self) -> str:
        return f"Counter(num={self._num})"
