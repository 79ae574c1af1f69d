"""
Rectangle subdivision for region colouring.

Splitting runs on an explicit worklist, one pass per round, so depth is bounded
by `rounds` and never by the call stack.
"""

from typing import Callable, List, Literal, Optional, Tuple

import numpy as np

from .errors import ConfigurationError
from .shapes import Bounds
from .vector import Point

SplitDirection = Literal['horizontal', 'vertical']


def split_rectangle(
    rect: Bounds,
    split_point: Point,
    direction: SplitDirection,
    padding: float = 0.0
) -> Tuple[Bounds, Bounds]:
    """
    Cut `rect` at `split_point`. A horizontal split places the halves side by
    side (cut along x); a vertical split stacks them (cut along y). `padding`
    is trimmed from both sides of the cut.
    """
    if direction == 'horizontal':
        left = Bounds(rect.x, rect.y, split_point.x - padding - rect.x, rect.height)
        right = Bounds(split_point.x + padding, rect.y,
                       rect.right - split_point.x - padding, rect.height)
        return left, right
    if direction == 'vertical':
        top = Bounds(rect.x, rect.y, rect.width, split_point.y - padding - rect.y)
        bottom = Bounds(rect.x, split_point.y + padding,
                        rect.width, rect.bottom - split_point.y - padding)
        return top, bottom
    raise ConfigurationError(f"unknown split direction {direction!r}")


def subdivide(
    root: Bounds,
    rng: np.random.Generator,
    rounds: int,
    split_chance: float = 1.0,
    min_area: float = 0.0,
    padding: float = 0.0,
    inset: float = 0.9,
    color_picker: Optional[Callable[[np.random.Generator], Optional[str]]] = None
) -> List[Bounds]:
    """
    Repeatedly split rectangles in `rounds` passes.

    In each pass every rectangle larger than `min_area` is split with
    probability `split_chance` at a random point inside its `inset`-scaled
    copy. Halves with no area left after padding are dropped.
    """
    if rounds < 0:
        raise ConfigurationError(f"rounds must not be negative, got {rounds}")

    rects = [root]
    for _ in range(rounds):
        worklist = rects
        rects = []
        while worklist:
            rect = worklist.pop()
            if rect.area <= min_area or rng.random() >= split_chance:
                rects.append(rect)
                continue

            target = rect.scale(inset)
            split_point = target.random_point(rng)
            direction = 'horizontal' if rng.random() < 0.5 else 'vertical'
            halves = split_rectangle(rect, split_point, direction, padding)

            for half in halves:
                if half.width <= 0 or half.height <= 0:
                    continue
                color = color_picker(rng) if color_picker is not None else rect.color
                rects.append(half.with_color(color))
    return rects
