"""Generators of unique identifiers for diagram elements."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IDGenerator(ABC):
    """Produces unique identifiers."""

    @abstractmethod
    def next_id(self) -> str:
        """Return the next identifier."""


class DefaultIDGenerator(IDGenerator):
    """Incrementing decimal identifiers starting from ``start``."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def next_id(self) -> str:
        current = self._next
        self._next += 1
        return str(current)

    def reset(self) -> DefaultIDGenerator:
        """Restart the sequence at zero; returns self for chaining."""
        self._next = 0
        return self