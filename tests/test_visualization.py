"""Tests for matplotlib previews."""

import matplotlib.pyplot as plt
import pytest

from growth.config import GrowthConfig
from growth.noise import NoiseField
from growth.orchestrator import GrowthOrchestrator
from growth.path import Path, PathStyle
from growth.shapes import Bounds, Circle
from growth.vector import Point
from growth.visualization import plot_growth_statistics, plot_noise_field, visualize_paths


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def test_visualize_paths(bounds, tmp_path):
    paths = [Path([Point(10, 10), Point(50, 50)], PathStyle(stroke_radius=4, stroke='#ff0000'))]
    out = tmp_path / 'preview.png'
    fig, ax = visualize_paths(
        paths, bounds,
        occupants=[Circle(Point(10, 10), 4)],
        rectangles=[Bounds(0, 0, 20, 20, '#00ff00')],
        show_grid=True, resolution=10,
        save_path=str(out)
    )
    assert out.exists()
    assert len(ax.collections) == 1


def test_noise_field_plot(bounds):
    fig, ax = plot_noise_field(NoiseField(2, 30.0), bounds, samples=40, arrows=8, chaos=1.5)
    assert ax.get_title().startswith('Noise field')


def test_growth_statistics():
    config = GrowthConfig(width=300, height=300, resolution=6, smoothness=100.0, radii=[(5.0, 1)],
                          step_size=5.0, min_line_length=15.0, max_line_length=150.0,
                          line_count=20, verbose=False)
    orchestrator = GrowthOrchestrator(config)
    orchestrator.run()
    fig, axes = plot_growth_statistics(orchestrator.report, config.min_line_length)
    assert len(axes) == 2
