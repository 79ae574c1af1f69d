"""
Visualization utilities for grown paths, grid occupancy and the noise field.
"""

from pathlib import Path as FilePath
from typing import List, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.patches import Circle as CirclePatch, Rectangle as RectanglePatch

from .noise import NoiseField
from .orchestrator import GrowthReport
from .path import Path
from .shapes import Bounds


def _finish(fig, save_path: Optional[str], show: bool, **savefig_kwargs):
    if save_path:
        FilePath(save_path).parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight', **savefig_kwargs)
        print(f"Saved visualization to {save_path}")
    if show:
        plt.show()


def visualize_paths(
    paths: List[Path],
    bounds: Bounds,
    occupants: Optional[list] = None,
    rectangles: Optional[List[Bounds]] = None,
    show_grid: bool = False,
    resolution: int = 0,
    default_color: str = 'saddlebrown',
    background: str = 'white',
    figsize: Tuple[int, int] = (10, 14),
    save_path: Optional[str] = None,
    show: bool = False
):
    """Draw paths with their stroke widths, optionally over filled rectangles and committed occupants."""
    fig, ax = plt.subplots(figsize=figsize)
    ax.set_facecolor(background)

    for rect in rectangles or []:
        ax.add_patch(RectanglePatch((rect.x, rect.y), rect.width, rect.height,
                                    facecolor=rect.color or 'none', edgecolor='none'))

    if occupants:
        for occ in occupants:
            c = occ.center()
            ax.add_patch(CirclePatch((c.x, c.y), occ.extent_radius(), fill=False,
                                     edgecolor='steelblue', linewidth=0.3, alpha=0.4))

    if show_grid and resolution > 0:
        for i in range(resolution + 1):
            x = bounds.x + bounds.width * i / resolution
            y = bounds.y + bounds.height * i / resolution
            ax.axvline(x, color='lightgray', linewidth=0.4)
            ax.axhline(y, color='lightgray', linewidth=0.4)

    segments = [[p.to_tuple() for p in path.points] for path in paths if len(path.points) > 1]
    if segments:
        colors = [path.style.stroke or default_color for path in paths if len(path.points) > 1]
        # Stroke radius is in canvas units; linewidths are points, so this is only a rough match.
        widths = [max(0.5, (path.style.stroke_radius or 1.0) / 10.0)
                  for path in paths if len(path.points) > 1]
        lc = LineCollection(segments, colors=colors, linewidths=widths, capstyle='round')
        ax.add_collection(lc)

    ax.add_patch(RectanglePatch((bounds.x, bounds.y), bounds.width, bounds.height,
                                fill=False, edgecolor='black', linewidth=0.5))
    ax.set_xlim(bounds.x, bounds.right)
    ax.set_ylim(bounds.bottom, bounds.y)
    ax.set_aspect('equal')
    ax.axis('off')
    plt.tight_layout()

    _finish(fig, save_path, show, facecolor=background, edgecolor='none')
    return fig, ax


def plot_noise_field(
    noise: NoiseField,
    bounds: Bounds,
    samples: int = 200,
    arrows: int = 30,
    chaos: float = 1.0,
    figsize: Tuple[int, int] = (10, 14),
    save_path: Optional[str] = None,
    show: bool = False
):
    """Heatmap of the field with the headings a chaos factor would produce."""
    xs = np.linspace(bounds.x, bounds.right, samples)
    ys = np.linspace(bounds.y, bounds.bottom, int(samples * bounds.height / bounds.width))
    values = noise.sample_grid(xs, ys)

    fig, ax = plt.subplots(figsize=figsize)
    im = ax.imshow(values, extent=(bounds.x, bounds.right, bounds.bottom, bounds.y),
                   cmap='coolwarm', vmin=-1, vmax=1)
    fig.colorbar(im, ax=ax, fraction=0.03)

    ax_x = np.linspace(bounds.x, bounds.right, arrows)
    ax_y = np.linspace(bounds.y, bounds.bottom, int(arrows * bounds.height / bounds.width))
    headings = noise.sample_grid(ax_x, ax_y) * chaos
    gx, gy = np.meshgrid(ax_x, ax_y)
    ax.quiver(gx, gy, np.cos(headings), np.sin(headings), angles='xy', pivot='mid', alpha=0.7)

    ax.set_xlim(bounds.x, bounds.right)
    ax.set_ylim(bounds.bottom, bounds.y)
    ax.set_aspect('equal')
    ax.set_title(f'Noise field (seed {noise.seed}, smoothness {noise.smoothness:g})')
    plt.tight_layout()

    _finish(fig, save_path, show)
    return fig, ax


def plot_growth_statistics(report: GrowthReport, min_line_length: Optional[float] = None,
                           save_path: Optional[str] = None, show: bool = False):
    """Histogram of grown lengths and counts per termination reason."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].hist(report.lengths, bins=30, color='saddlebrown', edgecolor='black')
    if min_line_length is not None:
        axes[0].axvline(min_line_length, color='red', linestyle='--', label='min line length')
        axes[0].legend()
    axes[0].set_xlabel('Line Length')
    axes[0].set_ylabel('Count')
    axes[0].set_title('Grown Length Distribution')

    reasons = sorted(report.terminations)
    axes[1].bar(reasons, [report.terminations[r] for r in reasons],
                color='forestgreen', edgecolor='black')
    axes[1].set_xlabel('Termination')
    axes[1].set_ylabel('Lines')
    axes[1].set_title(f'Accepted {report.accepted} / {report.attempted}')

    plt.tight_layout()
    _finish(fig, save_path, show)
    return fig, axes
