"""Tests for renderers, palettes and exporters."""

import json

import numpy as np
import pytest

from config.render_config import RenderConfig
from growth.errors import ConfigurationError
from growth.path import Path, PathStyle
from growth.shapes import Blob, Bounds, Circle
from growth.vector import Point
from rendering import (
    PALETTES,
    RasterRenderer,
    RegionalPalette,
    SimplePalette,
    SVGRenderer,
    WeightedPalette,
    export_paths,
    export_report,
    get_palette,
    load_paths,
    parse_color
)


@pytest.fixture
def canvas():
    return Bounds(0, 0, 200, 100)


@pytest.fixture
def line():
    return Path([Point(20, 50), Point(100, 50), Point(180, 50)],
                PathStyle(stroke_radius=10, stroke='#ff0000'))


class TestParseColor:
    def test_long_and_short_hex(self):
        assert parse_color('#ff0000') == (1.0, 0.0, 0.0, 1.0)
        assert parse_color('#fff') == (1.0, 1.0, 1.0, 1.0)

    def test_alpha(self):
        r, g, b, a = parse_color('#00000080')
        assert a == pytest.approx(128 / 255)

    @pytest.mark.parametrize("value", ['red', '#12', '#zzzzzz', ''])
    def test_invalid(self, value):
        with pytest.raises(ConfigurationError):
            parse_color(value)


class TestRasterRenderer:
    def test_background_and_stroke(self, canvas, line):
        renderer = RasterRenderer(canvas, RenderConfig(output_width=200), background='#0000ff')
        renderer.add_path(line)
        image = renderer.finish()

        assert image.shape == (100, 200, 4)
        assert image.dtype == np.uint8
        assert tuple(image[5, 5]) == (0, 0, 255, 255)
        assert tuple(image[50, 100]) == (255, 0, 0, 255)
        assert renderer.path_count == 1
        assert renderer.finished

    def test_output_scaling(self, canvas):
        renderer = RasterRenderer(canvas, RenderConfig(output_width=400))
        image = renderer.finish()
        assert image.shape[:2] == (200, 400)

    def test_shapes(self, canvas):
        renderer = RasterRenderer(canvas, RenderConfig(output_width=200), background='#000000')
        renderer.add_rectangle(Bounds(0, 0, 50, 50), '#00ff00')
        renderer.add_circle(Circle(Point(150, 50), 20), '#ffffff')
        renderer.add_blob(Blob(Point(100, 80), 5, (Point(95, 75), Point(105, 75), Point(100, 90)),
                               '#ff0000'))
        image = renderer.finish()
        assert tuple(image[25, 25]) == (0, 255, 0, 255)
        assert tuple(image[50, 150]) == (255, 255, 255, 255)

    def test_single_point_is_a_dot(self, canvas):
        renderer = RasterRenderer(canvas, RenderConfig(output_width=200), background='#000000')
        renderer.add_path(Path([Point(100, 50)], PathStyle(stroke_radius=10, stroke='#ffffff')))
        image = renderer.finish()
        assert tuple(image[50, 100]) == (255, 255, 255, 255)

    def test_writes_png(self, canvas, line, tmp_path):
        out = tmp_path / 'art.png'
        renderer = RasterRenderer(canvas, background='#000000', output_path=str(out))
        renderer.add_path(line)
        renderer.finish()
        assert out.exists()


class TestSVGRenderer:
    def test_writes_file(self, canvas, line, tmp_path):
        out = tmp_path / 'nested' / 'art.svg'
        renderer = SVGRenderer(str(out), canvas, background='#181D31')
        renderer.add_path(line)
        renderer.add_polygon([Point(0, 0), Point(10, 0), Point(5, 5)], '#ffffff')
        assert renderer.finish() == out
        text = out.read_text()
        assert text.lstrip().startswith('<?xml')
        assert '<svg' in text

    def test_finish_twice(self, canvas, tmp_path):
        renderer = SVGRenderer(str(tmp_path / 'a.svg'), canvas)
        first = renderer.finish()
        assert renderer.finish() == first


class TestPalettes:
    def test_presets(self, rng):
        for name in PALETTES:
            palette = get_palette(name)
            assert palette.background.startswith('#')
            assert palette.pick(rng) in palette.colors

    def test_unknown_palette(self):
        with pytest.raises(ConfigurationError):
            get_palette('neon')

    def test_case_insensitive(self):
        assert get_palette('Orange_Autumn').background == '#181D31'

    def test_simple_palette(self, rng):
        palette = SimplePalette(['#010101'])
        assert palette.pick(rng) == '#010101'
        with pytest.raises(ConfigurationError):
            SimplePalette([])

    def test_weighted_palette(self, rng):
        palette = WeightedPalette([('#aaaaaa', 1), ('#bbbbbb', 0)])
        assert {palette.pick(rng) for _ in range(50)} == {'#aaaaaa'}

    def test_regional_palette_covers_canvas(self, rng, canvas):
        regional = RegionalPalette.from_region(canvas, SimplePalette(['#111111', '#222222']), rng)
        for _ in range(50):
            assert regional.color_at(canvas.random_point(rng)) in ('#111111', '#222222')

    def test_regional_fallback(self):
        regional = RegionalPalette([Bounds(0, 0, 10, 10, '#123456')], fallback='#000000')
        assert regional.color_at(Point(5, 5)) == '#123456'
        assert regional.color_at(Point(50, 50)) == '#000000'


class TestExporters:
    def test_paths_round_trip(self, canvas, line, tmp_path):
        out = tmp_path / 'paths.json'
        export_paths([line], canvas.with_color('#000000'), str(out), metadata={'seed': 3})
        paths, bounds, metadata = load_paths(str(out))
        assert paths[0].points == line.points
        assert paths[0].style == line.style
        assert bounds == canvas
        assert bounds.color == '#000000'
        assert metadata == {'seed': 3}

    def test_report(self, tmp_path):
        out = tmp_path / 'stats' / 'report.json'
        export_report({'accepted': 4}, str(out))
        assert json.loads(out.read_text()) == {'accepted': 4}
