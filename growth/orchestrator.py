"""
GrowthOrchestrator - fills a canvas with non-overlapping grown paths.

Paths are grown one after another over a single shared SpatialGrid. A path
whose length reaches `min_line_length` is committed: every point goes into the
grid as an occupant with the path's stroke radius, so later paths steer clear
of it. Shorter paths are dropped without touching the grid. The generation
order is part of the artwork, so the loop is strictly sequential and every
random draw comes from one seeded Generator in a fixed order.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from .config import GrowthConfig
from .errors import OutOfBoundsError
from .grower import GrowthResult, PathGrower, Termination
from .mask import DensitySampler
from .noise import NoiseField
from .path import Path, PathStyle
from .profiling import profile
from .shapes import Blob, Circle
from .spatial import SpatialGrid
from .transforms import WeightedChoice, gen_weighted
from .vector import Point


@dataclass
class GrowthReport:
    attempted: int = 0
    accepted: int = 0
    discarded: int = 0
    committed_occupants: int = 0
    rejected_occupants: int = 0
    terminations: Counter = field(default_factory=Counter)
    lengths: List[float] = field(default_factory=list)

    def record(self, result: GrowthResult, accepted: bool):
        self.attempted += 1
        self.terminations[result.termination.value] += 1
        self.lengths.append(result.length)
        if accepted:
            self.accepted += 1
        else:
            self.discarded += 1

    def as_dict(self) -> Dict:
        return {
            'attempted': self.attempted,
            'accepted': self.accepted,
            'discarded': self.discarded,
            'committed_occupants': self.committed_occupants,
            'rejected_occupants': self.rejected_occupants,
            'terminations': dict(self.terminations),
            'mean_length': float(np.mean(self.lengths)) if self.lengths else 0.0,
        }


class GrowthOrchestrator:
    def __init__(
        self,
        config: GrowthConfig,
        rng: Optional[np.random.Generator] = None,
        grid: Optional[SpatialGrid] = None,
        noise: Optional[NoiseField] = None,
        palette=None,
        color_for: Optional[Callable[[Point], Optional[str]]] = None
    ):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.bounds = config.bounds
        self.growth_bounds = config.growth_bounds
        self.grid = grid if grid is not None else SpatialGrid(self.bounds, config.resolution)
        self.radii = WeightedChoice(config.radii)

        if noise is None:
            noise_seed = config.noise_seed
            if noise_seed is None:
                noise_seed = int(self.rng.integers(0, 2000))
            noise = NoiseField(noise_seed, config.smoothness)
        self.noise = noise

        self.palette = palette
        self.color_for = color_for

        self._sampler: Optional[DensitySampler] = None
        if config.seed_placement == 'mask':
            self._sampler = DensitySampler.from_image(
                config.mask_image_path, self.growth_bounds, config.mask_blur
            )

        self.paths: List[Path] = []
        self.report = GrowthReport()
        self.iteration = 0

    def _pick_radius(self, index: int) -> float:
        if index == 0 and self.config.first_line_radius is not None:
            return self.config.first_line_radius
        return float(self.radii.choose(self.rng))

    def _pick_start(self) -> Point:
        bounds = self.growth_bounds
        placement = self.config.seed_placement
        if placement == 'mask':
            return self._sampler.sample(self.rng)
        x = self.rng.uniform(bounds.x, bounds.right)
        if placement == 'weighted':
            y = gen_weighted(bounds.y, bounds.bottom, self.rng)
            return Point(x, min(y, bounds.bottom))
        y = self.rng.uniform(bounds.y, bounds.bottom)
        return Point(x, y)

    def _pick_heading(self) -> float:
        if self.config.random_heading:
            return float(self.rng.uniform(-math.pi, math.pi))
        return 0.0

    def _pick_color(self, start: Point) -> Optional[str]:
        if self.color_for is not None:
            color = self.color_for(start)
            if color is not None:
                return color
        if self.palette is not None:
            return self.palette.pick(self.rng)
        return None

    def _make_occupant(self, point: Point, radius: float, color: Optional[str]):
        if self.config.occupant == 'blob':
            return Blob.generate(point, radius, self.rng, color)
        return Circle(point, radius, color)

    def make_grower(self, start: Point, heading: float, radius: float,
                    long_line: bool = False) -> PathGrower:
        cfg = self.config
        bounds = cfg.long_line_bounds if long_line else self.growth_bounds
        return PathGrower(
            grid=self.grid,
            noise=self.noise,
            start=start,
            heading=heading,
            radius=radius,
            step_size=cfg.step_for(radius),
            max_length=cfg.long_line_max_length if long_line else cfg.max_line_length,
            chaos=cfg.chaos,
            min_separation=cfg.separation_for(radius),
            smoothness=cfg.smoothness_for(radius),
            bounds=bounds
        )

    @profile
    def commit(self, points: List[Point], radius: float, color: Optional[str] = None) -> int:
        """Insert every point as an occupant. Returns how many made it into the grid."""
        inserted = 0
        for point in points:
            try:
                self.grid.insert(self._make_occupant(point, radius, color))
                inserted += 1
            except OutOfBoundsError:
                self.report.rejected_occupants += 1
        self.report.committed_occupants += inserted
        return inserted

    def _build_paths(self, result: GrowthResult, color: Optional[str]) -> List[Path]:
        cfg = self.config
        path = Path(result.points, PathStyle(stroke_radius=result.radius, stroke=color))

        if cfg.split_line_chance > 0 and self.rng.random() < cfg.split_line_chance:
            return [
                Path(piece, PathStyle(
                    stroke_radius=result.radius,
                    stroke=self.palette.pick(self.rng) if self.palette is not None else color
                ))
                for piece in path.split(self.rng, with_gap=cfg.split_with_gap)
            ]
        return [path]

    def grow_line(self, index: int) -> Tuple[GrowthResult, List[Path]]:
        """Grow, judge and possibly commit one line. Returns the paths it produced."""
        cfg = self.config
        radius = self._pick_radius(index)
        start = self._pick_start()
        heading = self._pick_heading()
        color = self._pick_color(start)
        long_line = cfg.long_line_chance > 0 and self.rng.random() < cfg.long_line_chance

        result = self.make_grower(start, heading, radius, long_line).run()
        accepted = bool(result.points) and result.length >= cfg.min_line_length
        self.report.record(result, accepted)

        if not accepted:
            return result, []

        self.commit(result.points, radius, color)
        paths = self._build_paths(result, color)
        self.paths.extend(paths)
        return result, paths

    def run(self, callback: Optional[Callable[['GrowthOrchestrator', int, List[Path]], None]] = None) -> List[Path]:
        """
        Grow `line_count` lines. Optional callback is called after each line with
        (orchestrator, index, paths_added). Returns all accepted paths in order.
        """
        cfg = self.config
        if cfg.verbose:
            print(f"Growing {cfg.line_count} lines on a {cfg.width:.0f}x{cfg.height:.0f} canvas "
                  f"(grid {cfg.resolution}x{cfg.resolution}, seed {cfg.seed})")

        progress = tqdm(range(cfg.line_count), desc="Growing lines", disable=not cfg.verbose)
        for i in progress:
            _, paths = self.grow_line(i)
            self.iteration = i + 1

            if callback:
                callback(self, i, paths)

            if cfg.verbose and self.iteration % cfg.log_interval == 0:
                progress.set_postfix(accepted=self.report.accepted, occupants=len(self.grid))

        if cfg.verbose:
            summary = self.report.as_dict()
            print(f"Growth complete after {self.iteration} lines")
            print(f"  Accepted: {summary['accepted']}, discarded: {summary['discarded']}")
            print(f"  Occupants in grid: {len(self.grid)} ({summary['rejected_occupants']} outside bounds)")
            print(f"  Terminations: {summary['terminations']}")

        return self.paths

    @property
    def occupants(self) -> list:
        return self.grid.items()

    def termination_counts(self) -> Dict[Termination, int]:
        return {t: self.report.terminations.get(t.value, 0) for t in Termination}
