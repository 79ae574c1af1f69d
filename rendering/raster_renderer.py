"""
Raster output: draws into an in-memory Cairo image and hands back RGBA pixels.
"""

from pathlib import Path
from typing import Optional

import cairo
import imageio
import numpy as np

from config.render_config import RenderConfig
from growth.shapes import Bounds

from .base import Renderer


class RasterRenderer(Renderer):
    def __init__(self, bounds: Bounds, config: Optional[RenderConfig] = None,
                 background: Optional[str] = None, output_path: Optional[str] = None):
        self.output_path = Path(output_path) if output_path else None
        self.image: Optional[np.ndarray] = None
        super().__init__(bounds, config, background)

    def _create_surface(self) -> cairo.ImageSurface:
        return cairo.ImageSurface(cairo.FORMAT_ARGB32, self.output_width, self.output_height)

    def _surface_to_numpy(self) -> np.ndarray:
        self.surface.flush()
        buf = self.surface.get_data()
        stride = self.surface.get_stride()
        arr = np.ndarray(
            shape=(self.output_height, stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.output_width, :]
        # Cairo stores premultiplied BGRA on little-endian machines.
        return arr[:, :, [2, 1, 0, 3]].copy()

    def finish(self) -> np.ndarray:
        if not self._finished:
            self.image = self._surface_to_numpy()
            self.surface.finish()
            self._finished = True
            if self.output_path is not None:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)
                imageio.imwrite(self.output_path, self.image)
                print(f"Saved PNG to {self.output_path}")
        return self.image
