"""
Piet - the canvas cut into coloured rectangles.
"""

from typing import Optional

import numpy as np

from config.pipeline import ArtworkConfig
from growth.shapes import Bounds
from growth.subdivision import subdivide
from rendering.palette import get_palette

from .base import PieceResult

ROOT_SCALE = 0.95


def generate(artwork: ArtworkConfig, rng: Optional[np.random.Generator] = None) -> PieceResult:
    rng = rng if rng is not None else np.random.default_rng(artwork.seed)
    cfg = artwork.piet
    palette = get_palette(artwork.palette)
    bounds = Bounds.from_size(artwork.size, artwork.size * artwork.aspect_ratio, palette.background)

    rects = subdivide(
        bounds.scale(ROOT_SCALE).with_color(None),
        rng,
        cfg.rounds,
        split_chance=cfg.split_chance,
        min_area=bounds.area * cfg.min_area_ratio,
        padding=cfg.padding,
        color_picker=palette.pick
    )

    if artwork.verbose:
        print(f"Subdivided the canvas into {len(rects)} rectangles over {cfg.rounds} rounds")

    return PieceResult(
        bounds=bounds,
        rectangles=rects,
        stats={'rectangles': len(rects), 'rounds': cfg.rounds}
    )
