"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderConfig:
    output_width: int = 1500            # Canvas units are scaled to this width
    background_color: Optional[str] = None  # None = palette background

    stroke_scale: float = 1.0           # Stroke width = stroke radius * stroke_scale
    default_stroke: str = '#eeeeee'
    line_cap: str = 'round'             # 'round', 'butt' or 'square'

    antialiasing: bool = True
    write_png: bool = False
    write_paths_data: bool = True
