"""
Rendering module: turns grown paths and shapes into SVG or raster images.
Uses Cairo for resolution-independent vector graphics.
"""

from config.render_config import RenderConfig
from .base import Renderer
from .svg_renderer import SVGRenderer
from .raster_renderer import RasterRenderer
from .palette import (
    PALETTES,
    RegionalPalette,
    SimplePalette,
    WeightedPalette,
    get_palette
)
from .exporters import export_paths, export_report, load_paths
from .utils import parse_color
