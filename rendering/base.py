"""
Base renderer class defining the interface for all renderers.

The growth engine only needs `add_path` and `finish`; the other drawing calls
serve the pieces that also paint regions, blobs and backgrounds.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from config.render_config import RenderConfig
from growth.path import Path
from growth.shapes import Blob, Bounds, Circle
from growth.vector import Point

from .utils import parse_color

_LINE_CAPS = {
    'round': cairo.LINE_CAP_ROUND,
    'butt': cairo.LINE_CAP_BUTT,
    'square': cairo.LINE_CAP_SQUARE,
}


class Renderer(ABC):
    def __init__(self, bounds: Bounds, config: Optional[RenderConfig] = None,
                 background: Optional[str] = None):
        self.config = config or RenderConfig()
        self.bounds = bounds
        self.scale = self.config.output_width / bounds.width
        self.output_width = int(round(bounds.width * self.scale))
        self.output_height = int(round(bounds.height * self.scale))
        self.path_count = 0
        self._finished = False

        self.surface = self._create_surface()
        self.ctx = cairo.Context(self.surface)
        if self.config.antialiasing:
            self.ctx.set_antialias(cairo.ANTIALIAS_BEST)
        else:
            self.ctx.set_antialias(cairo.ANTIALIAS_NONE)

        # Canvas units in, output pixels out.
        self.ctx.scale(self.scale, self.scale)
        self.ctx.translate(-bounds.x, -bounds.y)
        self.ctx.set_line_cap(_LINE_CAPS.get(self.config.line_cap, cairo.LINE_CAP_ROUND))
        self.ctx.set_line_join(cairo.LINE_JOIN_ROUND)

        fill = self.config.background_color or background
        if fill is not None:
            self.add_rectangle(bounds, fill)

    @abstractmethod
    def _create_surface(self) -> cairo.Surface:
        pass

    def _set_color(self, color: str):
        r, g, b, a = parse_color(color)
        self.ctx.set_source_rgba(r, g, b, a)

    def _trace(self, points: Sequence[Point], close: bool = False):
        first, *rest = points
        self.ctx.move_to(first.x, first.y)
        for point in rest:
            self.ctx.line_to(point.x, point.y)
        if close:
            self.ctx.close_path()

    def add_path(self, path: Path):
        """Stroke a polyline; single-point paths are drawn as a dot."""
        if not path.points:
            return

        style = path.style
        width = (style.stroke_radius or 1.0) * self.config.stroke_scale
        self.ctx.set_line_width(width)

        if len(path.points) == 1:
            p = path.points[0]
            self.ctx.new_sub_path()
            self.ctx.arc(p.x, p.y, width / 2.0, 0, 2 * np.pi)
            self._set_color(style.stroke or self.config.default_stroke)
            self.ctx.fill()
        else:
            self._trace(path.points)
            if style.fill is not None:
                self._set_color(style.fill)
                self.ctx.fill_preserve()
            self._set_color(style.stroke or self.config.default_stroke)
            self.ctx.stroke()

        self.path_count += 1

    def add_polygon(self, points: Sequence[Point], fill: str):
        if len(points) < 3:
            return
        self._trace(points, close=True)
        self._set_color(fill)
        self.ctx.fill()

    def add_rectangle(self, rect: Bounds, fill: str):
        self.ctx.rectangle(rect.x, rect.y, rect.width, rect.height)
        self._set_color(fill)
        self.ctx.fill()

    def add_circle(self, circle: Circle, fill: str):
        c = circle.center()
        self.ctx.new_sub_path()
        self.ctx.arc(c.x, c.y, circle.radius, 0, 2 * np.pi)
        self._set_color(fill)
        self.ctx.fill()

    def add_blob(self, blob: Blob, fill: Optional[str] = None):
        color = fill or blob.color
        if color is not None:
            self.add_polygon(blob.points, color)

    @property
    def finished(self) -> bool:
        return self._finished

    @abstractmethod
    def finish(self):
        """Flush everything drawn so far. The renderer cannot be drawn on afterwards."""
        pass
