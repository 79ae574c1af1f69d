"""
PathGrower - grows one polyline through the noise field until it collides,
leaves the canvas or reaches its maximum length.

Each step samples the noise field at the current position, deflects the base
heading by `noise * chaos`, advances by `step_size` and checks a circle of the
stroke radius at the new position against the occupants already in the grid.
A start point that already sits too close to an occupant ends growth at once
with no points.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import ConfigurationError, OutOfBoundsError
from .noise import NoiseField
from .profiling import profile
from .shapes import Bounds, Circle, edge_distance
from .spatial import SpatialGrid
from .vector import Point


class Termination(Enum):
    COLLISION = 'collision'
    OUT_OF_BOUNDS = 'out_of_bounds'
    MAX_LENGTH_REACHED = 'max_length_reached'


@dataclass
class GrowthState:
    position: Point
    heading: float
    length: float = 0.0
    steps: int = 0
    points: List[Point] = field(default_factory=list)


@dataclass
class GrowthResult:
    points: List[Point]
    length: float
    steps: int
    termination: Termination
    radius: float

    @property
    def point_count(self) -> int:
        return len(self.points)


class PathGrower:
    def __init__(
        self,
        grid: SpatialGrid,
        noise: NoiseField,
        start: Point,
        heading: float,
        radius: float,
        step_size: float,
        max_length: float,
        chaos: float = 1.0,
        min_separation: Optional[float] = None,
        smoothness: Optional[float] = None,
        bounds: Optional[Bounds] = None
    ):
        if not step_size > 0:
            raise ConfigurationError(f"step_size must be positive, got {step_size}")
        if not (max_length > 0 and math.isfinite(max_length)):
            raise ConfigurationError(f"max_length must be positive and finite, got {max_length}")
        if radius < 0:
            raise ConfigurationError(f"stroke radius must not be negative, got {radius}")

        self.grid = grid
        self.noise = noise
        self.radius = float(radius)
        self.step_size = float(step_size)
        self.max_length = float(max_length)
        self.chaos = float(chaos)
        self.min_separation = self.radius / 2.0 if min_separation is None else float(min_separation)
        self.smoothness = smoothness
        self.bounds = bounds if bounds is not None else grid.bounds

        self.base_heading = float(heading)
        self.state = GrowthState(position=start, heading=self.base_heading, points=[start])
        self.termination: Optional[Termination] = None

    @property
    def is_growing(self) -> bool:
        return self.termination is None

    @property
    def max_steps(self) -> int:
        """Upper bound on step() calls before the grower must have terminated."""
        return math.ceil(self.max_length / self.step_size) + 1

    def _terminate(self, reason: Termination) -> Termination:
        self.termination = reason
        return reason

    def _collides(self, candidate: Circle) -> bool:
        # Centers further apart than this cannot be within min_separation edge to edge.
        reach = self.min_separation + candidate.radius + self.grid.max_extent_radius
        for neighbor in self.grid.neighbors(candidate, reach):
            if edge_distance(candidate, neighbor) < self.min_separation:
                return True
        return False

    def _check_seed(self) -> Optional[Termination]:
        """The start point is held to the same separation as every grown point."""
        try:
            if self._collides(Circle(self.state.position, self.radius)):
                return Termination.COLLISION
        except OutOfBoundsError:
            return Termination.OUT_OF_BOUNDS
        return None

    @profile
    def step(self) -> Optional[Termination]:
        """Advance one step. Returns the termination reason once growth has stopped."""
        if self.termination is not None:
            return self.termination

        state = self.state
        if state.steps == 0:
            blocked = self._check_seed()
            if blocked is not None:
                state.points.clear()
                return self._terminate(blocked)

        n = self.noise.sample(state.position.x, state.position.y, self.smoothness)
        state.heading = self.base_heading + n * self.chaos
        position = state.position.advance(state.heading, self.step_size)
        state.steps += 1

        candidate = Circle(position, self.radius)
        if not self.bounds.contains(position):
            return self._terminate(Termination.OUT_OF_BOUNDS)

        try:
            if self._collides(candidate):
                return self._terminate(Termination.COLLISION)
        except OutOfBoundsError:
            return self._terminate(Termination.OUT_OF_BOUNDS)

        state.position = position
        state.points.append(position)
        state.length += self.step_size

        if state.length >= self.max_length:
            return self._terminate(Termination.MAX_LENGTH_REACHED)
        return None

    def run(self) -> GrowthResult:
        while self.termination is None:
            self.step()

        return GrowthResult(
            points=list(self.state.points),
            length=self.state.length,
            steps=self.state.steps,
            termination=self.termination,
            radius=self.radius
        )
