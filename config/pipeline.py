"""
Unified configuration for an artwork run.

One JSON file describes the piece to generate, its canvas, seed and every
tuning parameter. All output paths are derived from the piece name and seed.
"""

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import List, Optional, Tuple
import json

from growth.errors import ConfigurationError

from .nightfall_config import NightfallConfig
from .piet_config import PietConfig
from .render_config import RenderConfig

PIECES = ('forces', 'wildlands', 'nightfall', 'piet')


@dataclass
class ArtworkConfig:
    """
    Single source of truth for one artwork.
    Growth settings are read by GrowthConfig.from_artwork.
    """

    # ==================== MAIN SETTINGS ====================
    piece: str = 'forces'
    seed: int = 0
    palette: str = 'orange_autumn'

    # ==================== OUTPUT SETTINGS ====================
    output_base: str = 'outputs'

    # ==================== CANVAS ====================
    size: float = 1500.0
    aspect_ratio: float = 1.4
    margin: float = 0.9

    # ==================== GROWTH SETTINGS ====================
    resolution: int = 20
    noise_seed: Optional[int] = None
    smoothness: float = 1200.0
    chaos: float = 1.8
    radii: List[Tuple[float, float]] = field(
        default_factory=lambda: [(40.0, 10), (100.0, 4), (150.0, 2)]
    )
    first_line_radius: Optional[float] = 350.0
    step_size: float = 20.0
    step_scale: Optional[float] = None
    min_line_length: float = 80.0
    max_line_length: float = 2500.0
    line_count: int = 5000
    min_separation: Optional[float] = None
    separation_ratio: float = 0.5

    # Seeding
    seed_placement: str = 'uniform'  # 'uniform', 'weighted' or 'mask'
    mask_image_path: Optional[str] = None
    mask_blur: float = 0.0
    random_heading: bool = False

    # Line splitting
    split_line_chance: float = 0.0
    split_with_gap: bool = False

    # ==================== WILDLANDS SETTINGS ====================
    region_count: int = 10

    # ==================== OTHER PIECES ====================
    nightfall: NightfallConfig = field(default_factory=NightfallConfig)
    piet: PietConfig = field(default_factory=PietConfig)

    # ==================== RENDERING ====================
    render: RenderConfig = field(default_factory=RenderConfig)

    # ==================== MISC ====================
    verbose: bool = True
    profile: bool = False

    def __post_init__(self):
        if self.piece not in PIECES:
            raise ConfigurationError(f"unknown piece {self.piece!r}, expected one of {PIECES}")
        if not self.size > 0 or not self.aspect_ratio > 0:
            raise ConfigurationError("canvas size and aspect ratio must be positive")

    # ==================== DERIVED PATHS ====================
    @property
    def name(self) -> str:
        return f'{self.piece}_{self.seed}'

    @property
    def output_dir(self) -> Path:
        return Path(self.output_base) / self.piece

    @property
    def svg_path(self) -> Path:
        return self.output_dir / f'{self.name}.svg'

    @property
    def png_path(self) -> Path:
        return self.output_dir / f'{self.name}.png'

    @property
    def paths_data_path(self) -> Path:
        return self.output_dir / f'{self.name}_paths.json'

    @property
    def stats_path(self) -> Path:
        return self.output_dir / f'{self.name}_stats.json'

    @property
    def preview_path(self) -> Path:
        return self.output_dir / f'{self.name}_preview.png'

    @property
    def config_snapshot_path(self) -> Path:
        return self.output_dir / f'{self.name}_config.json'

    # ==================== DIRECTORY CREATION ====================
    def create_output_dirs(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)


def _known(cls, data: dict) -> dict:
    names = {f.name for f in fields(cls)}
    unknown = set(data) - names
    if unknown:
        raise ConfigurationError(f"unknown {cls.__name__} settings: {sorted(unknown)}")
    return data


def config_from_dict(data: dict) -> ArtworkConfig:
    data = dict(_known(ArtworkConfig, data))
    if 'nightfall' in data:
        data['nightfall'] = NightfallConfig(**_known(NightfallConfig, data['nightfall']))
    if 'piet' in data:
        data['piet'] = PietConfig(**_known(PietConfig, data['piet']))
    if 'render' in data:
        data['render'] = RenderConfig(**_known(RenderConfig, data['render']))
    if 'radii' in data:
        data['radii'] = [tuple(r) for r in data['radii']]
    return ArtworkConfig(**data)


def load_config(path: str = 'config/artwork.json') -> ArtworkConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return ArtworkConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    return config_from_dict(data)


def save_config(config: ArtworkConfig, path: str = 'config/artwork.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(asdict(config), f, indent=2)

    if config.verbose:
        print(f"Saved config to {config_path}")
