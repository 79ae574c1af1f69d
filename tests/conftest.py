"""Shared test fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from config.pipeline import ArtworkConfig
from growth.noise import NoiseField
from growth.shapes import Bounds
from growth.spatial import SpatialGrid


@pytest.fixture
def bounds():
    return Bounds(0.0, 0.0, 100.0, 100.0)


@pytest.fixture
def grid(bounds):
    return SpatialGrid(bounds, 10)


@pytest.fixture
def noise():
    return NoiseField(seed=7, smoothness=50.0)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def small_artwork(tmp_path):
    """A canvas small enough for every piece to finish in well under a second."""
    return ArtworkConfig(
        seed=3,
        output_base=str(tmp_path / 'outputs'),
        size=300.0,
        resolution=10,
        smoothness=200.0,
        radii=[(6.0, 3), (10.0, 1)],
        first_line_radius=20.0,
        step_size=6.0,
        min_line_length=12.0,
        max_line_length=300.0,
        line_count=60,
        verbose=False,
    )
