"""
Rendering utility functions.
"""

from typing import Tuple

from growth.errors import ConfigurationError


def parse_color(color: str) -> Tuple[float, float, float, float]:
    """Convert '#rgb', '#rgba', '#rrggbb' or '#rrggbbaa' to an RGBA tuple in [0, 1]."""
    value = color.strip().lstrip('#')
    if len(value) in (3, 4):
        value = ''.join(ch * 2 for ch in value)
    if len(value) == 6:
        value += 'ff'
    if len(value) != 8:
        raise ConfigurationError(f"cannot parse color {color!r}")

    try:
        channels = [int(value[i:i + 2], 16) / 255.0 for i in range(0, 8, 2)]
    except ValueError as e:
        raise ConfigurationError(f"cannot parse color {color!r}") from e
    return tuple(channels)
