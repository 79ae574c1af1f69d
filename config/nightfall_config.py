"""
Configuration for the Nightfall constellation piece.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from growth.errors import ConfigurationError

ForceMethod = Literal['distort', 'push', 'pull']


@dataclass
class NightfallConfig:
    points: int = 5000
    distance: float = 50.0        # Connect points closer than this
    min_distance: float = 10.0    # ...but not closer than this
    sphere_count: int = 3
    force: ForceMethod = 'distort'
    stroke_width: float = 0.2
    stroke: str = '#eeeeee'
    background: str = '#111111'
    resolution: Optional[int] = None   # Grid cells per side; None derives it from distance

    def __post_init__(self):
        if self.force not in ('distort', 'push', 'pull'):
            raise ConfigurationError(f"unknown force method {self.force!r}")
        if self.points < 0 or not self.distance > 0:
            raise ConfigurationError("points must be >= 0 and distance positive")
        if self.resolution is not None and self.resolution < 1:
            raise ConfigurationError(f"resolution must be at least 1, got {self.resolution}")

    def grid_resolution(self, size: float) -> int:
        """Explicit resolution, or distance / size * 1000 cells per side."""
        if self.resolution is not None:
            return self.resolution
        return max(int(self.distance / size * 1000), 1)
