"""
Wildlands - thousands of short strokes made of small irregular blobs.

The canvas is first covered by a handful of large colour regions (blobs that
take their colour from a regional palette). A stroke is coloured by the first
region containing its start point. A few strokes are allowed to run long and
reach closer to the canvas edge.
"""

from typing import Optional

import numpy as np

from config.pipeline import ArtworkConfig
from growth import GrowthConfig, GrowthOrchestrator
from rendering.palette import RegionalPalette, get_palette

from .base import PieceResult, color_regions, region_color

BLOB_RADIUS = 3.5
STEP_SCALE = 2.5
MAX_STEPS = 150
MIN_STEPS = 4
DEFAULT_COLOR = '#A34040'


def growth_config(artwork: ArtworkConfig) -> GrowthConfig:
    step = BLOB_RADIUS * STEP_SCALE
    return GrowthConfig.from_artwork(
        artwork,
        radii=[(BLOB_RADIUS, 1)],
        first_line_radius=None,
        step_scale=STEP_SCALE,
        smoothness=500.0,
        chaos=4.0,
        occupant='blob',
        min_separation=None,
        separation_ratio=1.0,
        max_line_length=MAX_STEPS * step,
        min_line_length=MIN_STEPS * step,
        long_line_chance=0.03,
        split_line_chance=0.0,
    )


def generate(artwork: ArtworkConfig, rng: Optional[np.random.Generator] = None) -> PieceResult:
    rng = rng if rng is not None else np.random.default_rng(artwork.seed)
    config = growth_config(artwork)
    bounds = config.bounds

    palette = get_palette(artwork.palette)
    regional = RegionalPalette.from_region(bounds, palette, rng, rounds=5)
    regions = color_regions(bounds, rng, artwork.region_count, regional.color_at)

    orchestrator = GrowthOrchestrator(
        config,
        rng=rng,
        color_for=lambda point: region_color(regions, point, DEFAULT_COLOR)
    )
    orchestrator.run()

    stats = orchestrator.report.as_dict()
    stats['regions'] = len(regions)

    return PieceResult(
        bounds=bounds.with_color(palette.background),
        blobs=list(orchestrator.occupants),
        stats=stats,
        grid=orchestrator.grid
    )
