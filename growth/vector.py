"""
Immutable 2D point used for positions, path vertices and degenerate occupants.
"""

import math
from typing import NamedTuple


class Point(NamedTuple):
    x: float
    y: float

    def offset(self, dx: float, dy: float) -> 'Point':
        return Point(self.x + dx, self.y + dy)

    def advance(self, heading: float, distance: float) -> 'Point':
        """Move `distance` along `heading` (radians)."""
        return Point(
            self.x + math.cos(heading) * distance,
            self.y + math.sin(heading) * distance
        )

    def distance_to(self, other: 'Point') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def angle_to(self, other: 'Point') -> float:
        return math.atan2(other.y - self.y, other.x - self.x)

    # A point is the degenerate occupant: zero extent, contains only itself.
    def center(self) -> 'Point':
        return self

    def extent_radius(self) -> float:
        return 0.0

    def contains(self, point: 'Point') -> bool:
        return self == point

    def to_tuple(self) -> tuple:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Point({self.x:.2f}, {self.y:.2f})"
