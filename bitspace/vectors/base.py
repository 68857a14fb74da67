"""Minimal vector capability consumed by the projection scorer."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Vector(Protocol):
    """Anything with a dimension and an overlap measure against its own kind."""

    @property
    def dimension(self) -> int:
        ...

    def measure_overlap(self, other: "Vector") -> float:
        """Similarity score; 1.0 for identical vectors."""
        ...
