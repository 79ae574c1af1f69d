"""Tests for the many-line growth loop."""

import numpy as np
import pytest

from growth.config import GrowthConfig
from growth.errors import ConfigurationError
from growth.grower import Termination
from growth.noise import NoiseField
from growth.orchestrator import GrowthOrchestrator
from growth.shapes import Blob, Circle, edge_distance
from growth.vector import Point
from rendering.palette import SimplePalette


def small_config(**kwargs):
    params = dict(
        width=400.0,
        height=400.0,
        seed=21,
        resolution=10,
        noise_seed=4,
        smoothness=150.0,
        chaos=1.5,
        radii=[(5.0, 2), (9.0, 1)],
        step_size=6.0,
        large_radius_step_size=None,
        min_line_length=18.0,
        max_line_length=240.0,
        line_count=80,
        verbose=False,
    )
    params.update(kwargs)
    return GrowthConfig(**params)


def test_same_seed_same_artwork():
    a = GrowthOrchestrator(small_config()).run()
    b = GrowthOrchestrator(small_config()).run()
    assert [p.points for p in a] == [p.points for p in b]
    assert [p.style for p in a] == [p.style for p in b]


def test_different_seed_differs():
    a = GrowthOrchestrator(small_config(seed=1)).run()
    b = GrowthOrchestrator(small_config(seed=2)).run()
    assert [p.points for p in a] != [p.points for p in b]


def test_short_lines_are_never_committed():
    # Growth bounds too small for a single step
    orchestrator = GrowthOrchestrator(small_config(margin=0.01))
    paths = orchestrator.run()
    assert paths == []
    assert len(orchestrator.grid) == 0
    assert orchestrator.report.accepted == 0
    assert orchestrator.report.discarded == 80


def test_accepted_paths_meet_threshold():
    orchestrator = GrowthOrchestrator(small_config())
    orchestrator.run()
    report = orchestrator.report
    assert report.attempted == 80
    assert report.accepted + report.discarded == 80
    assert report.accepted > 0
    for path in orchestrator.paths:
        assert path.length >= 18.0 - 1e-9


def test_every_point_becomes_an_occupant():
    orchestrator = GrowthOrchestrator(small_config())
    paths = orchestrator.run()
    points = sum(len(p.points) for p in paths)
    assert len(orchestrator.grid) + orchestrator.report.rejected_occupants == points


def test_later_lines_keep_their_distance():
    orchestrator = GrowthOrchestrator(small_config(resolution=8))
    paths = orchestrator.run()
    assert len(paths) > 1

    for j, later in enumerate(paths):
        radius = later.style.stroke_radius
        separation = radius * 0.5
        for p in later.points:
            for earlier in paths[:j]:
                for q in earlier.points:
                    gap = edge_distance(Circle(p, radius), Circle(q, earlier.style.stroke_radius))
                    assert gap >= separation - 1e-9


def test_blocked_start_is_never_committed():
    orchestrator = GrowthOrchestrator(small_config(min_line_length=0.0))
    orchestrator.commit([Point(200, 200)], 9.0)
    orchestrator._pick_start = lambda: Point(205, 200)

    result, paths = orchestrator.grow_line(1)
    assert result.termination == Termination.COLLISION
    assert result.points == []
    assert paths == []
    assert len(orchestrator.grid) == 1


def test_first_line_radius():
    orchestrator = GrowthOrchestrator(small_config(first_line_radius=30.0, min_line_length=0.0))
    result, _ = orchestrator.grow_line(0)
    assert result.radius == 30.0
    result, _ = orchestrator.grow_line(1)
    assert result.radius in (5.0, 9.0)


def test_termination_counts_cover_every_line():
    orchestrator = GrowthOrchestrator(small_config())
    orchestrator.run()
    counts = orchestrator.termination_counts()
    assert set(counts) == set(Termination)
    assert sum(counts.values()) == 80


def test_commit_counts_rejected_points():
    orchestrator = GrowthOrchestrator(small_config())
    inserted = orchestrator.commit([Point(10, 10), Point(500, 10), Point(20, 20)], 4.0)
    assert inserted == 2
    assert orchestrator.report.rejected_occupants == 1
    assert len(orchestrator.grid) == 2


def test_palette_colors_paths():
    palette = SimplePalette(['#111111', '#222222'])
    paths = GrowthOrchestrator(small_config(), palette=palette).run()
    assert paths
    assert {p.style.stroke for p in paths} <= {'#111111', '#222222'}


def test_color_for_takes_priority():
    palette = SimplePalette(['#111111'])
    paths = GrowthOrchestrator(small_config(), palette=palette,
                               color_for=lambda point: '#abcdef').run()
    assert {p.style.stroke for p in paths} == {'#abcdef'}


def test_blob_occupants():
    orchestrator = GrowthOrchestrator(small_config(occupant='blob', separation_ratio=1.0))
    orchestrator.run()
    assert orchestrator.occupants
    assert all(isinstance(o, Blob) for o in orchestrator.occupants)


def test_split_lines_share_points():
    config = small_config(split_line_chance=1.0, max_line_length=400.0)
    orchestrator = GrowthOrchestrator(config, palette=SimplePalette(['#000000']))
    orchestrator.run()
    assert orchestrator.report.accepted > 0
    assert len(orchestrator.paths) >= orchestrator.report.accepted
    for path in orchestrator.paths:
        assert len(path.points) > 1


def test_long_lines_use_their_own_limit():
    config = small_config(long_line_chance=1.0, long_line_max_length=30.0, min_line_length=0.0)
    orchestrator = GrowthOrchestrator(config)
    orchestrator.run()
    assert max(orchestrator.report.lengths) <= 30.0


def test_weighted_seed_placement_stays_inside():
    config = small_config(seed_placement='weighted', min_line_length=0.0, line_count=30)
    orchestrator = GrowthOrchestrator(config)
    inner = config.growth_bounds
    for _ in range(30):
        assert inner.contains(orchestrator._pick_start())


def test_injected_noise_and_rng():
    rng = np.random.default_rng(0)
    noise = NoiseField(99, 150.0)
    orchestrator = GrowthOrchestrator(small_config(noise_seed=None), rng=rng, noise=noise)
    assert orchestrator.noise is noise
    assert orchestrator.rng is rng


def test_invalid_weights_fail_early():
    with pytest.raises(ConfigurationError):
        GrowthOrchestrator(small_config(radii=[(5.0, 0), (9.0, 0)]))


def test_length_40_is_discarded_when_minimum_is_50():
    config = small_config(min_line_length=50.0, step_size=5.0, long_line_chance=1.0,
                          long_line_max_length=40.0)
    orchestrator = GrowthOrchestrator(config)
    paths = orchestrator.run()
    assert max(orchestrator.report.lengths) == pytest.approx(40.0)
    assert paths == []
    assert len(orchestrator.grid) == 0
