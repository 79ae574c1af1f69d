"""
Forces - thick noise-steered lines packed edge to edge.

The canvas is first scattered with colour regions, large blobs that each take
a palette colour. A line takes the colour of the first region containing its
start point, or a random palette colour outside every region. The first line
is very wide and claims a large share of the canvas; the rest fill whatever
room is left.
"""

from typing import List, Optional

import numpy as np

from config.pipeline import ArtworkConfig
from growth import GrowthConfig, GrowthOrchestrator
from growth.shapes import Blob, Bounds
from rendering.palette import get_palette

from .base import PieceResult, color_regions, region_color

REGION_COUNT = 20


def make_regions(bounds: Bounds, palette, rng: np.random.Generator,
                 count: int = REGION_COUNT) -> List[Blob]:
    return color_regions(bounds, rng, count, lambda _: palette.pick(rng))


def generate(artwork: ArtworkConfig, rng: Optional[np.random.Generator] = None) -> PieceResult:
    rng = rng if rng is not None else np.random.default_rng(artwork.seed)
    palette = get_palette(artwork.palette)
    config = GrowthConfig.from_artwork(artwork)

    regions = make_regions(config.bounds, palette, rng)

    # Outside every region the orchestrator falls back to a palette pick
    orchestrator = GrowthOrchestrator(
        config,
        rng=rng,
        palette=palette,
        color_for=lambda point: region_color(regions, point)
    )
    paths = orchestrator.run()

    stats = orchestrator.report.as_dict()
    stats['regions'] = len(regions)

    return PieceResult(
        bounds=config.bounds.with_color(palette.background),
        paths=paths,
        stats=stats,
        grid=orchestrator.grid
    )
