"""
Image-driven seed density.

An image is turned into a per-pixel weight map (alpha where the image has
transparency, darkness otherwise); start points are drawn with probability
proportional to that weight and then mapped onto the canvas.
"""

from typing import Tuple

import numpy as np
from PIL import Image
from scipy import ndimage

from .errors import ConfigurationError
from .shapes import Bounds
from .vector import Point


def load_density(image_path: str, blur: float = 0.0) -> np.ndarray:
    """Load an image as a float density map in [0, 1], shape (height, width)."""
    img = Image.open(image_path).convert('RGBA')
    arr = np.asarray(img, dtype=np.float32) / 255.0

    alpha = arr[:, :, 3]
    if alpha.min() < 1.0:
        density = alpha
    else:
        luminance = 0.299 * arr[:, :, 0] + 0.587 * arr[:, :, 1] + 0.114 * arr[:, :, 2]
        density = 1.0 - luminance

    if blur > 0:
        density = ndimage.gaussian_filter(density, sigma=blur)

    return np.clip(density, 0.0, 1.0)


def get_density_dimensions(density: np.ndarray) -> Tuple[int, int]:
    """Return (width, height) of the density map."""
    return density.shape[1], density.shape[0]


class DensitySampler:
    """Draws canvas points from a density map."""

    def __init__(self, density: np.ndarray, bounds: Bounds):
        total = float(density.sum())
        if total <= 0:
            raise ConfigurationError("mask has no weight to sample start points from")

        self.density = density
        self.bounds = bounds
        self._cdf = np.cumsum(density.ravel(), dtype=np.float64) / total
        self._width, self._height = get_density_dimensions(density)

    @classmethod
    def from_image(cls, image_path: str, bounds: Bounds, blur: float = 0.0) -> 'DensitySampler':
        return cls(load_density(image_path, blur), bounds)

    def sample(self, rng: np.random.Generator) -> Point:
        flat = int(np.searchsorted(self._cdf, rng.random(), side='right'))
        flat = min(flat, self._cdf.size - 1)
        row, col = divmod(flat, self._width)

        # Jitter within the pixel, then scale pixel space onto the bounds.
        px = (col + rng.random()) / self._width
        py = (row + rng.random()) / self._height
        return Point(
            self.bounds.x + px * self.bounds.width,
            self.bounds.y + py * self.bounds.height
        )
