"""
Generative pieces built on the growth core.

Each piece exposes `generate(artwork, rng=None) -> PieceResult`; `draw` sends
a result to any renderer.
"""

from . import forces, nightfall, piet, wildlands
from .base import PieceResult, draw

GENERATORS = {
    'forces': forces.generate,
    'wildlands': wildlands.generate,
    'nightfall': nightfall.generate,
    'piet': piet.generate,
}


def generate(artwork, rng=None) -> PieceResult:
    return GENERATORS[artwork.piece](artwork, rng)


__all__ = [
    'GENERATORS',
    'PieceResult',
    'draw',
    'generate'
]
