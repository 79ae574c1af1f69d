"""
Configuration for collision-aware path growth.
"""

import math
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from .errors import ConfigurationError
from .shapes import Bounds

SeedPlacement = Literal['uniform', 'weighted', 'mask']
OccupantKind = Literal['circle', 'blob']

SEED_PLACEMENTS = ('uniform', 'weighted', 'mask')
OCCUPANT_KINDS = ('circle', 'blob')


@dataclass
class GrowthConfig:
    width: float = 1500.0
    height: float = 2100.0
    seed: int = 0

    resolution: int = 20
    noise_seed: Optional[int] = None  # None = drawn from the main RNG
    smoothness: float = 1200.0        # Higher = broader, smoother curves
    chaos: float = 1.8                # How far noise can swing the heading (radians)

    # (radius, weight): thick lines are rarer than thin ones
    radii: List[Tuple[float, float]] = field(
        default_factory=lambda: [(40.0, 10), (100.0, 4), (150.0, 2)]
    )
    first_line_radius: Optional[float] = None
    step_size: float = 20.0
    step_scale: Optional[float] = None   # step = radius * step_scale when set
    large_radius_step_size: Optional[float] = 180.0  # used for radii above 150

    min_line_length: float = 80.0
    max_line_length: float = 2500.0
    line_count: int = 5000

    margin: float = 0.9               # Growth happens inside bounds scaled by this
    min_separation: Optional[float] = None
    separation_ratio: float = 0.5     # min_separation = radius * ratio when not set

    seed_placement: SeedPlacement = 'uniform'
    mask_image_path: Optional[str] = None
    mask_blur: float = 0.0
    random_heading: bool = False

    # A small share of lines may run past the usual length inside wider bounds
    long_line_chance: float = 0.0
    long_line_margin: float = 0.94
    long_line_max_length: float = 10000.0

    occupant: OccupantKind = 'circle'
    split_line_chance: float = 0.0
    split_with_gap: bool = False

    verbose: bool = True
    log_interval: int = 500

    def __post_init__(self):
        if not (self.width > 0 and self.height > 0):
            raise ConfigurationError(f"canvas must have a positive size, got {self.width}x{self.height}")
        if int(self.resolution) != self.resolution or self.resolution < 1:
            raise ConfigurationError(f"resolution must be a positive integer, got {self.resolution}")
        if not self.smoothness > 0:
            raise ConfigurationError(f"smoothness must be positive, got {self.smoothness}")
        if not self.step_size > 0:
            raise ConfigurationError(f"step_size must be positive, got {self.step_size}")
        if self.step_scale is not None and not self.step_scale > 0:
            raise ConfigurationError(f"step_scale must be positive, got {self.step_scale}")
        if not (self.max_line_length > 0 and math.isfinite(self.max_line_length)):
            raise ConfigurationError(f"max_line_length must be positive and finite, got {self.max_line_length}")
        if self.min_line_length < 0 or self.min_line_length > self.max_line_length:
            raise ConfigurationError(
                f"min_line_length must lie in [0, {self.max_line_length}], got {self.min_line_length}"
            )
        if self.line_count < 0:
            raise ConfigurationError(f"line_count must not be negative, got {self.line_count}")
        if not 0 < self.margin <= 1:
            raise ConfigurationError(f"margin must lie in (0, 1], got {self.margin}")
        if self.seed_placement not in SEED_PLACEMENTS:
            raise ConfigurationError(
                f"unknown seed placement {self.seed_placement!r}, expected one of {SEED_PLACEMENTS}"
            )
        if self.seed_placement == 'mask' and not self.mask_image_path:
            raise ConfigurationError("seed_placement='mask' requires mask_image_path")
        if self.occupant not in OCCUPANT_KINDS:
            raise ConfigurationError(f"unknown occupant kind {self.occupant!r}, expected one of {OCCUPANT_KINDS}")
        if not 0 <= self.split_line_chance <= 1:
            raise ConfigurationError(f"split_line_chance must lie in [0, 1], got {self.split_line_chance}")
        if not 0 <= self.long_line_chance <= 1:
            raise ConfigurationError(f"long_line_chance must lie in [0, 1], got {self.long_line_chance}")
        if not 0 < self.long_line_margin <= 1:
            raise ConfigurationError(f"long_line_margin must lie in (0, 1], got {self.long_line_margin}")
        if not (self.long_line_max_length > 0 and math.isfinite(self.long_line_max_length)):
            raise ConfigurationError("long_line_max_length must be positive and finite")
        if any(r <= 0 for r, _ in self.radii):
            raise ConfigurationError("stroke radii must be positive")
        # Weight validation happens in WeightedChoice when the orchestrator is built.

    @property
    def bounds(self) -> Bounds:
        return Bounds.from_size(self.width, self.height)

    @property
    def growth_bounds(self) -> Bounds:
        return self.bounds.scale(self.margin)

    @property
    def long_line_bounds(self) -> Bounds:
        return self.bounds.scale(self.long_line_margin)

    def step_for(self, radius: float) -> float:
        if self.step_scale is not None:
            return radius * self.step_scale
        if self.large_radius_step_size is not None and radius > 150.0:
            return self.large_radius_step_size
        return self.step_size

    def smoothness_for(self, radius: float) -> float:
        if 400.0 <= radius < 600.0:
            return self.smoothness * 3.0
        return self.smoothness

    def separation_for(self, radius: float) -> float:
        if self.min_separation is not None:
            return self.min_separation
        return radius * self.separation_ratio

    @classmethod
    def from_artwork(cls, artwork, **overrides) -> 'GrowthConfig':
        """Create a GrowthConfig from an ArtworkConfig."""
        params = dict(
            width=artwork.size,
            height=artwork.size * artwork.aspect_ratio,
            seed=artwork.seed,
            resolution=artwork.resolution,
            noise_seed=artwork.noise_seed,
            smoothness=artwork.smoothness,
            chaos=artwork.chaos,
            radii=[tuple(r) for r in artwork.radii],
            first_line_radius=artwork.first_line_radius,
            step_size=artwork.step_size,
            step_scale=artwork.step_scale,
            min_line_length=artwork.min_line_length,
            max_line_length=artwork.max_line_length,
            line_count=artwork.line_count,
            margin=artwork.margin,
            min_separation=artwork.min_separation,
            separation_ratio=artwork.separation_ratio,
            seed_placement=artwork.seed_placement,
            mask_image_path=artwork.mask_image_path,
            mask_blur=artwork.mask_blur,
            random_heading=artwork.random_heading,
            split_line_chance=artwork.split_line_chance,
            split_with_gap=artwork.split_with_gap,
            verbose=artwork.verbose,
        )
        params.update(overrides)
        return cls(**params)
