"""
Data exporters to convert growth output into renderer-friendly JSON.
Keeps rendering decoupled from the simulation: a saved file can be
re-rendered without growing anything.
"""

import json
from pathlib import Path as FilePath
from typing import Any, Dict, List

from growth.path import Path, PathStyle
from growth.shapes import Bounds
from growth.vector import Point


def export_paths(paths: List[Path], bounds: Bounds, output_path: str,
                 metadata: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Export paths to JSON.

    Format:
    {
        "width": float,
        "height": float,
        "background": str | null,
        "metadata": {...},
        "paths": [
            {"points": [[x, y], ...], "stroke_radius": float, "stroke": str, "fill": str}
        ]
    }
    """
    data = {
        "width": bounds.width,
        "height": bounds.height,
        "background": bounds.color,
        "metadata": metadata or {},
        "paths": [
            {
                "points": [[p.x, p.y] for p in path.points],
                "stroke_radius": path.style.stroke_radius,
                "stroke": path.style.stroke,
                "fill": path.style.fill,
            }
            for path in paths
        ]
    }

    FilePath(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    return data


def load_paths(path: str):
    """Returns (paths, bounds, metadata) from a file written by export_paths."""
    with open(path, 'r') as f:
        data = json.load(f)

    bounds = Bounds(0.0, 0.0, data['width'], data['height'], data.get('background'))
    paths = [
        Path(
            [Point(float(x), float(y)) for x, y in item['points']],
            PathStyle(
                stroke_radius=item.get('stroke_radius'),
                stroke=item.get('stroke'),
                fill=item.get('fill'),
            )
        )
        for item in data['paths']
    ]
    return paths, bounds, data.get('metadata', {})


def export_report(report: Dict[str, Any], output_path: str):
    FilePath(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(report, f, indent=2)
