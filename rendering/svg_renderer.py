"""
SVG output through Cairo's vector backend.
"""

from pathlib import Path
from typing import Optional

import cairo

from config.render_config import RenderConfig
from growth.shapes import Bounds

from .base import Renderer


class SVGRenderer(Renderer):
    def __init__(self, output_path: str, bounds: Bounds,
                 config: Optional[RenderConfig] = None, background: Optional[str] = None):
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(bounds, config, background)

    def _create_surface(self) -> cairo.SVGSurface:
        surface = cairo.SVGSurface(str(self.output_path), self.output_width, self.output_height)
        surface.set_document_unit(cairo.SVGUnit.PX)
        return surface

    def finish(self) -> Path:
        if not self._finished:
            self.surface.finish()
            self._finished = True
            print(f"Saved SVG ({self.path_count} paths) to {self.output_path}")
        return self.output_path
