"""
Nightfall - a constellation of points joined by hairlines.

Points are scattered with a bias toward the top of the canvas and pushed
around by a few invisible spheres. Each point is then joined to nearby
points and removed from the grid, so every pair is drawn at most once. Points
near the top get many connections, points near the bottom only a few.
Candidate links come from the grid's 3x3 scan, so a fine grid skips some
links that are shorter than `distance`.
"""

import math
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from config.nightfall_config import NightfallConfig
from config.pipeline import ArtworkConfig
from growth.errors import OutOfBoundsError
from growth.path import Path, PathStyle
from growth.shapes import Bounds, Circle
from growth.spatial import SpatialGrid
from growth.transforms import gen_weighted, map_range
from growth.vector import Point

from .base import PieceResult

MOST_CONNECTIONS = 70
FEWEST_CONNECTIONS = 5


def make_spheres(bounds: Bounds, size: float, rng: np.random.Generator, count: int) -> List[Circle]:
    return [
        Circle(bounds.random_point(rng), size / int(rng.integers(4, 8)))
        for _ in range(count)
    ]


def apply_force(point: Point, sphere: Circle, method: str) -> Point:
    """Displace a point lying inside `sphere`."""
    center = sphere.center()
    distance = point.distance_to(center)
    angle = point.angle_to(center)
    radius = sphere.radius

    if method == 'distort':
        force = -distance / radius
    elif method == 'push':
        force = -(radius - distance) / radius
    else:
        # pull; a point sitting on the center has nowhere to go
        if distance == 0:
            return point
        force = radius / distance

    dx = map_range(math.cos(angle) * force, (0.0, 1.0), (1.0, radius))
    dy = map_range(math.sin(angle) * force, (0.0, 1.0), (1.0, radius))
    return point.offset(dx, dy)


def scatter(grid: SpatialGrid, inner: Bounds, size: float, cfg: NightfallConfig,
            rng: np.random.Generator) -> int:
    """Fill the grid with points. Returns how many fell outside the canvas."""
    rejected = 0

    # A thin band along the top edge
    for _ in range(cfg.points // 10):
        x = rng.uniform(inner.x, inner.right)
        y = gen_weighted(inner.y, inner.y + inner.y * 0.05, rng)
        grid.insert(Point(x, y))

    spheres = make_spheres(inner, size, rng, cfg.sphere_count)

    for _ in range(cfg.points):
        x = rng.uniform(inner.x, inner.right)
        y = gen_weighted(inner.y, inner.bottom, rng)
        point = Point(x, y)
        for sphere in spheres:
            if sphere.contains(point):
                point = apply_force(point, sphere, cfg.force)
        try:
            grid.insert(point)
        except OutOfBoundsError:
            rejected += 1
    return rejected


def connect(grid: SpatialGrid, bounds: Bounds, inner: Bounds, cfg: NightfallConfig,
            verbose: bool = False) -> List[Path]:
    style = PathStyle(stroke_radius=cfg.stroke_width, stroke=cfg.stroke)
    paths = []

    for point in tqdm(grid.items(), desc="Connecting points", disable=not verbose):
        max_count = map_range(
            point.y,
            (inner.y, bounds.height - inner.y),
            (MOST_CONNECTIONS, FEWEST_CONNECTIONS)
        )
        max_count = max(int(max_count), 0)

        linked = 0
        for neighbor in grid.neighbors(point, cfg.distance):
            if linked >= max_count:
                break
            if neighbor.distance_to(point) > cfg.min_distance:
                paths.append(Path([point, neighbor], style))
                linked += 1

        grid.remove(point)
    return paths


def generate(artwork: ArtworkConfig, rng: Optional[np.random.Generator] = None) -> PieceResult:
    rng = rng if rng is not None else np.random.default_rng(artwork.seed)
    cfg = artwork.nightfall
    size = artwork.size
    bounds = Bounds.from_size(size, size * artwork.aspect_ratio, cfg.background)
    inner = bounds.scale(artwork.margin)

    resolution = cfg.grid_resolution(size)
    grid = SpatialGrid(bounds, resolution)

    if artwork.verbose:
        print(f"Scattering {cfg.points} points (grid {resolution}x{resolution}, force {cfg.force})")

    rejected = scatter(grid, inner, size, cfg, rng)
    placed = len(grid)
    paths = connect(grid, bounds, inner, cfg, verbose=artwork.verbose)

    if artwork.verbose:
        print(f"  Placed {placed} points ({rejected} pushed off the canvas), drew {len(paths)} lines")

    return PieceResult(
        bounds=bounds,
        paths=paths,
        stats={'points': placed, 'rejected_points': rejected, 'connections': len(paths)},
        grid=grid
    )
