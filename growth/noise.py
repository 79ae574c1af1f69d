"""
Seeded 2D gradient noise used to steer path growth.

Classic Perlin construction: a shuffled permutation table picks one of eight
unit gradients per lattice corner and the corner contributions are blended
with the quintic fade curve. Output is rescaled to [-1, 1].
"""

import math
from typing import Optional

import numpy as np

from .errors import ConfigurationError


_GRADIENTS = np.array([
    (1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0),
    (math.sqrt(0.5), math.sqrt(0.5)), (-math.sqrt(0.5), math.sqrt(0.5)),
    (math.sqrt(0.5), -math.sqrt(0.5)), (-math.sqrt(0.5), -math.sqrt(0.5)),
])

# Max |noise| for unit gradients in 2D is sqrt(2)/2.
_AMPLITUDE = math.sqrt(2.0)


def _fade(t):
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a, b, t):
    return a + (b - a) * t


class NoiseField:
    """
    Deterministic, continuous scalar field over the plane.

    `smoothness` divides the input coordinates, so larger values give
    broader, gentler features. Sampling never fails.
    """

    def __init__(self, seed: int = 0, smoothness: float = 1.0):
        if not smoothness > 0:
            raise ConfigurationError(f"smoothness must be positive, got {smoothness}")

        self.seed = int(seed)
        self.smoothness = float(smoothness)

        rng = np.random.default_rng(self.seed)
        perm = rng.permutation(256)
        self._perm_array = np.concatenate([perm, perm])
        self._perm = [int(v) for v in self._perm_array]
        self._grads = [tuple(g) for g in _GRADIENTS]

    def _gradient(self, ix: int, iy: int):
        h = self._perm[self._perm[ix & 255] + (iy & 255)]
        return self._grads[h & 7]

    def _raw(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        fx = x - x0
        fy = y - y0

        g00 = self._gradient(x0, y0)
        g10 = self._gradient(x0 + 1, y0)
        g01 = self._gradient(x0, y0 + 1)
        g11 = self._gradient(x0 + 1, y0 + 1)

        n00 = g00[0] * fx + g00[1] * fy
        n10 = g10[0] * (fx - 1) + g10[1] * fy
        n01 = g01[0] * fx + g01[1] * (fy - 1)
        n11 = g11[0] * (fx - 1) + g11[1] * (fy - 1)

        u = _fade(fx)
        v = _fade(fy)
        return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)

    def sample(self, x: float, y: float, smoothness: Optional[float] = None) -> float:
        s = self.smoothness if smoothness is None else smoothness
        value = self._raw(x / s, y / s) * _AMPLITUDE
        return max(-1.0, min(1.0, value))

    def sample_grid(self, xs: np.ndarray, ys: np.ndarray,
                    smoothness: Optional[float] = None) -> np.ndarray:
        """
        Vectorized sampling over a meshgrid of `xs` x `ys`.
        Returns an array of shape (len(ys), len(xs)).
        """
        s = self.smoothness if smoothness is None else smoothness
        gx, gy = np.meshgrid(np.asarray(xs, dtype=float) / s,
                             np.asarray(ys, dtype=float) / s)

        x0 = np.floor(gx).astype(np.int64)
        y0 = np.floor(gy).astype(np.int64)
        fx = gx - x0
        fy = gy - y0

        perm = self._perm_array

        def corner(ix, iy, dx, dy):
            h = perm[perm[ix & 255] + (iy & 255)] & 7
            g = _GRADIENTS[h]
            return g[..., 0] * dx + g[..., 1] * dy

        n00 = corner(x0, y0, fx, fy)
        n10 = corner(x0 + 1, y0, fx - 1, fy)
        n01 = corner(x0, y0 + 1, fx, fy - 1)
        n11 = corner(x0 + 1, y0 + 1, fx - 1, fy - 1)

        u = _fade(fx)
        v = _fade(fy)
        values = _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v) * _AMPLITUDE
        return np.clip(values, -1.0, 1.0)
