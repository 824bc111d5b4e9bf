"""Abstract repository for the daily order-number counters."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CounterRepository(ABC):

    @abstractmethod
    def increment(self, day_key: str) -> int:
        """Bump the counter for *day_key* and return the new value.

        Implementations must make the read-modify-write atomic with
        respect to other callers of the same repository.
        Raises StorageError when the new value cannot be persisted.
        """

    @abstractmethod
    def load(self) -> dict[str, int]:
        """Return the whole day-key -> counter map."""

    @abstractmethod
    def reset(self) -> None:
        """Forget every counter."""
