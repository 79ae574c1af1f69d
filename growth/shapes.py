"""
Shapes that can occupy the spatial grid, plus the canvas bounds.

Every occupant exposes the same capability set: `center()`, `extent_radius()`
and `contains(point)`. The grid only ever looks at the center; collision checks
approximate the body by its bounding circle.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Protocol, Tuple

import numpy as np

from .errors import ConfigurationError
from .vector import Point


class Occupant(Protocol):
    def center(self) -> Point: ...

    def extent_radius(self) -> float: ...

    def contains(self, point: Point) -> bool: ...


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle. `contains` is closed, so edge points are inside."""
    x: float
    y: float
    width: float
    height: float
    color: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_size(cls, width: float, height: float, color: Optional[str] = None) -> 'Bounds':
        return cls(0.0, 0.0, width, height, color)

    def validate(self) -> 'Bounds':
        if not (self.width > 0 and self.height > 0):
            raise ConfigurationError(
                f"bounds must have a positive size, got {self.width}x{self.height}"
            )
        return self

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Point) -> bool:
        return self.x <= point.x <= self.right and self.y <= point.y <= self.bottom

    def scale(self, factor: float) -> 'Bounds':
        """Scale around the center of the rectangle."""
        width = self.width * factor
        height = self.height * factor
        return Bounds(
            self.x - (width - self.width) / 2.0,
            self.y - (height - self.height) / 2.0,
            width,
            height,
            self.color
        )

    def with_color(self, color: Optional[str]) -> 'Bounds':
        return Bounds(self.x, self.y, self.width, self.height, color)

    def random_point(self, rng: np.random.Generator) -> Point:
        return Point(rng.uniform(self.x, self.right), rng.uniform(self.y, self.bottom))


@dataclass(frozen=True)
class Circle:
    position: Point
    radius: float
    color: Optional[str] = field(default=None, compare=False)

    def center(self) -> Point:
        return self.position

    def extent_radius(self) -> float:
        return self.radius

    def contains(self, point: Point) -> bool:
        return self.position.distance_to(point) < self.radius

    def distance(self, other: 'Occupant') -> float:
        """Edge-to-edge distance; negative when the bodies overlap."""
        return edge_distance(self, other)


@dataclass(frozen=True)
class Blob:
    """
    Irregular polygon around `position`. The grid treats it as a circle of
    `radius`; `contains` is an exact point-in-polygon test on the outline.
    """
    position: Point
    radius: float
    points: Tuple[Point, ...] = ()
    color: Optional[str] = field(default=None, compare=False)

    @classmethod
    def generate(
        cls,
        position: Point,
        radius: float,
        rng: np.random.Generator,
        color: Optional[str] = None
    ) -> 'Blob':
        count = int(rng.integers(7, 24))
        jitter = rng.uniform(0.8, 1.2, size=(count, 2))
        outline = []
        for i in range(count):
            angle = (i / count) * math.pi * 2.0
            outline.append(Point(
                position.x + math.cos(angle) * radius * jitter[i, 0],
                position.y + math.sin(angle) * radius * jitter[i, 1]
            ))
        return cls(position, radius, tuple(outline), color)

    def center(self) -> Point:
        return self.position

    def extent_radius(self) -> float:
        return self.radius

    def contains(self, point: Point) -> bool:
        return polygon_contains(self.points, point)

    def distance(self, other: 'Occupant') -> float:
        return edge_distance(self, other)


def edge_distance(a: Occupant, b: Occupant) -> float:
    """Center distance minus both extent radii."""
    return a.center().distance_to(b.center()) - a.extent_radius() - b.extent_radius()


def polygon_contains(vertices, point: Point) -> bool:
    """Even-odd ray casting; fewer than three vertices contain nothing."""
    n = len(vertices)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        if (yi > point.y) != (yj > point.y):
            x_cross = xi + (point.y - yi) * (xj - xi) / (yj - yi)
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside
