"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height pair with a computed area."""

    width: float
    height: float

    @property
    def area(self) -> float:
        """Recomputed on every read."""
        return self.width * self.height
