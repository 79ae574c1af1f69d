"""
Path - the polyline artifact handed to a renderer.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .shapes import Bounds
from .vector import Point


@dataclass
class PathStyle:
    stroke_radius: Optional[float] = None
    stroke: Optional[str] = None
    fill: Optional[str] = None


@dataclass
class Path:
    points: List[Point]
    style: PathStyle = field(default_factory=PathStyle)

    def add_point(self, point: Point):
        self.points.append(point)

    @property
    def length(self) -> float:
        total = 0.0
        for a, b in zip(self.points, self.points[1:]):
            total += a.distance_to(b)
        return total

    def bounding_box(self) -> Optional[Bounds]:
        if not self.points:
            return None
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Bounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def split(self, rng: np.random.Generator, with_gap: bool = False,
              chance: float = 0.2) -> List[List[Point]]:
        """
        Break the polyline at random interior points. Without a gap the pieces
        share their break point; with a gap the segment after the break point is
        dropped. Pieces shorter than two points are discarded.
        The tail after the last break is kept, so a path without breaks comes
        back whole.
        """
        pieces = []
        start = 0
        for i in range(1, len(self.points) - 1):
            if rng.random() < chance:
                if with_gap:
                    piece = self.points[start:i]
                    start = i + 1
                else:
                    piece = self.points[start:i + 1]
                    start = i
                if len(piece) > 1:
                    pieces.append(list(piece))

        tail = self.points[start:]
        if len(tail) > 1:
            pieces.append(list(tail))
        return pieces

    def __len__(self) -> int:
        return len(self.points)
