"""
Random-choice and range helpers shared by the pieces.

All randomness comes from an explicitly passed numpy Generator so a fixed seed
reproduces the whole artwork.
"""

from typing import Generic, List, Sequence, Tuple, TypeVar

import numpy as np

from .errors import ConfigurationError

T = TypeVar('T')


class WeightedChoice(Generic[T]):
    """
    A set of items picked at random, biased by integer or float weights.

        radii = WeightedChoice([(40.0, 10), (100.0, 4), (150.0, 2)])
        radius = radii.choose(rng)  # thin lines are the most common
    """

    def __init__(self, choices: Sequence[Tuple[T, float]]):
        choices = list(choices)
        if not choices:
            raise ConfigurationError("weighted choice needs at least one option")

        weights = np.array([w for _, w in choices], dtype=float)
        if np.any(~np.isfinite(weights)) or np.any(weights < 0):
            raise ConfigurationError(f"weights must be finite and non-negative, got {weights.tolist()}")
        total = weights.sum()
        if total <= 0:
            raise ConfigurationError("at least one weight must be positive")

        self._items: List[T] = [item for item, _ in choices]
        self._probabilities = weights / total

    @property
    def items(self) -> List[T]:
        return list(self._items)

    @property
    def probabilities(self) -> np.ndarray:
        return self._probabilities.copy()

    def choose(self, rng: np.random.Generator) -> T:
        if len(self._items) == 1:
            return self._items[0]
        return self._items[int(rng.choice(len(self._items), p=self._probabilities))]

    def __len__(self) -> int:
        return len(self._items)


def gen_weighted(low: float, high: float, rng: np.random.Generator) -> float:
    """
    Integer-valued sample in [low, high], biased towards `low`.

    The absolute difference of two uniform draws has a triangular distribution
    peaking at zero.
    """
    a = rng.random()
    b = rng.random()
    return float(np.floor(abs(b - a) * (1.0 + high - low) + low))


def map_range(value: float, source: Tuple[float, float], target: Tuple[float, float]) -> float:
    """Linearly map `value` from the `source` range onto the `target` range."""
    s0, s1 = source
    t0, t1 = target
    if s1 == s0:
        return t0
    return t0 + (value - s0) * (t1 - t0) / (s1 - s0)
