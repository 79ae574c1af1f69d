"""
Configuration module.
"""

from .pipeline import ArtworkConfig, PIECES, config_from_dict, load_config, save_config
from .render_config import RenderConfig
from .nightfall_config import NightfallConfig
from .piet_config import PietConfig

__all__ = [
    'ArtworkConfig',
    'PIECES',
    'config_from_dict',
    'load_config',
    'save_config',
    'RenderConfig',
    'NightfallConfig',
    'PietConfig'
]
