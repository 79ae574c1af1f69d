"""
Colour palettes. Every pick takes the caller's Generator so palette choices
are part of the seeded random stream.
"""

from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from growth.errors import ConfigurationError
from growth.shapes import Bounds
from growth.subdivision import subdivide
from growth.transforms import WeightedChoice
from growth.vector import Point


class SimplePalette:
    def __init__(self, colors: Sequence[str], background: Optional[str] = None):
        if not colors:
            raise ConfigurationError("palette needs at least one color")
        self.colors = list(colors)
        self.background = background

    def pick(self, rng: np.random.Generator) -> str:
        return self.colors[int(rng.integers(len(self.colors)))]


class WeightedPalette:
    def __init__(self, choices: Sequence[Tuple[str, float]], background: Optional[str] = None):
        self._choice = WeightedChoice(choices)
        self.colors = self._choice.items
        self.background = background

    def pick(self, rng: np.random.Generator) -> str:
        return self._choice.choose(rng)


class RegionalPalette:
    """Colours by position: the canvas is subdivided and each region gets a palette colour."""

    def __init__(self, regions: List[Bounds], fallback: Optional[str] = None):
        self.regions = regions
        self.fallback = fallback

    @classmethod
    def from_region(cls, bounds: Bounds, palette, rng: np.random.Generator,
                    rounds: int = 7) -> 'RegionalPalette':
        regions = subdivide(bounds, rng, rounds, inset=1.0, color_picker=palette.pick)
        return cls(regions, palette.background)

    def color_at(self, point: Point) -> Optional[str]:
        for region in self.regions:
            if region.contains(point):
                return region.color
        return self.fallback


PALETTES: Dict[str, Callable] = {
    # Vibrant orange, red, off-white against a dark background
    'orange_autumn': lambda: WeightedPalette([
        ('#E1B31E', 3),
        ('#678983', 1),
        ('#FB5252', 1),
        ('#F0E9D2', 2),
        ('#E6DDC4', 2),
    ], background='#181D31'),
    # Pastel pinks, orange, red
    'peaches_and_cream': lambda: SimplePalette(
        ['#CBCBE5', '#EAD5C9', '#C4594A', '#8786BF'], background='#EAA984'
    ),
    'spring_break': lambda: SimplePalette(
        ['#ABD2EB', '#5AA9E6', '#DFC232', '#BE2C58'], background='#F9F9F9'
    ),
    'red_white_black': lambda: WeightedPalette([
        ('#FFFFFF', 2),
        ('#000231', 1),
        ('#002214', 1),
    ], background='#EC0000'),
}


def get_palette(name: str):
    try:
        return PALETTES[name.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"{name} is not a valid palette, valid values are {', '.join(PALETTES)}"
        ) from None
