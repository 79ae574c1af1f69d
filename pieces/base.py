"""
What a piece hands back: the shapes to draw, in drawing order, plus the
canvas they live on. Also the colour regions shared by the line pieces.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from growth.path import Path
from growth.shapes import Blob, Bounds
from growth.spatial import SpatialGrid
from growth.vector import Point


@dataclass
class PieceResult:
    bounds: Bounds                    # Canvas; bounds.color is the background
    paths: List[Path] = field(default_factory=list)
    rectangles: List[Bounds] = field(default_factory=list)
    blobs: List[Blob] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)
    grid: Optional[SpatialGrid] = None

    @property
    def background(self) -> Optional[str]:
        return self.bounds.color

    def counts(self) -> Tuple[int, int, int]:
        return len(self.rectangles), len(self.blobs), len(self.paths)


def draw(result: PieceResult, renderer):
    """Rectangles first, then blobs, then paths on top. Returns whatever finish() returns."""
    for rect in result.rectangles:
        if rect.color is not None:
            renderer.add_rectangle(rect, rect.color)
    for blob in result.blobs:
        renderer.add_blob(blob)
    for path in result.paths:
        renderer.add_path(path)
    return renderer.finish()


def color_regions(bounds: Bounds, rng: np.random.Generator, count: int,
                  color_picker: Callable[[Point], Optional[str]]) -> List[Blob]:
    """Scatter `count` large blobs, each coloured by `color_picker(center)`."""
    regions = []
    for _ in range(count):
        center = bounds.random_point(rng)
        radius = rng.uniform(bounds.width / 10.0, bounds.width / 7.0)
        regions.append(Blob.generate(center, radius, rng, color_picker(center)))
    return regions


def region_color(regions: List[Blob], point: Point, default: Optional[str] = None) -> Optional[str]:
    for region in regions:
        if region.contains(point):
            return region.color
    return default
