"""
Configuration for the Piet region-colouring piece.
"""

from dataclasses import dataclass

from growth.errors import ConfigurationError


@dataclass
class PietConfig:
    rounds: int = 5
    split_chance: float = 0.8
    padding: float = 8.0
    min_area_ratio: float = 0.01  # Rectangles smaller than this share of the canvas stay whole

    def __post_init__(self):
        if self.rounds < 0:
            raise ConfigurationError(f"rounds must not be negative, got {self.rounds}")
        if not 0 <= self.split_chance <= 1:
            raise ConfigurationError(f"split_chance must lie in [0, 1], got {self.split_chance}")
