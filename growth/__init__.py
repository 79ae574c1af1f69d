"""
Collision-aware path growth for generative vector art.

Seeded paths wander through a smooth noise field and stop when they would
touch anything already drawn; a uniform spatial grid keeps the collision
checks cheap.
"""

from .errors import ConfigurationError, GrowthError, OutOfBoundsError
from .vector import Point
from .shapes import Blob, Bounds, Circle, Occupant, edge_distance
from .noise import NoiseField
from .spatial import SpatialGrid
from .grower import GrowthResult, GrowthState, PathGrower, Termination
from .path import Path, PathStyle
from .config import GrowthConfig
from .orchestrator import GrowthOrchestrator, GrowthReport
from .transforms import WeightedChoice, gen_weighted, map_range
from .subdivision import split_rectangle, subdivide
from .visualization import visualize_paths, plot_noise_field, plot_growth_statistics

__all__ = [
    'ConfigurationError',
    'GrowthError',
    'OutOfBoundsError',
    'Point',
    'Blob',
    'Bounds',
    'Circle',
    'Occupant',
    'edge_distance',
    'NoiseField',
    'SpatialGrid',
    'GrowthResult',
    'GrowthState',
    'PathGrower',
    'Termination',
    'Path',
    'PathStyle',
    'GrowthConfig',
    'GrowthOrchestrator',
    'GrowthReport',
    'WeightedChoice',
    'gen_weighted',
    'map_range',
    'split_rectangle',
    'subdivide',
    'visualize_paths',
    'plot_noise_field',
    'plot_growth_statistics'
]
