"""
Main entry point for generating a piece.

Configuration is loaded from config/artwork.json (defaults when missing);
command-line flags override individual settings. All outputs are written
under <output_base>/<piece>/ and named after the piece and seed.

Pieces:
    forces    - thick noise-steered lines packed edge to edge
    wildlands - short blob strokes coloured by region
    nightfall - point constellation joined by hairlines
    piet      - canvas cut into coloured rectangles
"""

import argparse
from dataclasses import replace

import matplotlib

from config import PIECES, load_config, save_config
from growth.profiling import profile_block, profiler
from growth.visualization import visualize_paths
from pieces import draw, generate
from rendering import RasterRenderer, SVGRenderer, export_paths, export_report


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate a piece of collision-aware vector art.")
    parser.add_argument('--piece', type=str, choices=PIECES, default=None,
                        help='Piece to generate (default: from config)')
    parser.add_argument('--config', type=str, default='config/artwork.json',
                        help='Path to the artwork config JSON (default: config/artwork.json)')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--line-count', type=int, default=None, help='Number of lines to grow')
    parser.add_argument('--palette', type=str, default=None, help='Palette name')
    parser.add_argument('--png', action='store_true', help='Also write a PNG')
    parser.add_argument('--preview', action='store_true', help='Save a matplotlib preview')
    parser.add_argument('--show', action='store_true', help='Show the preview window')
    parser.add_argument('--profile', action='store_true', help='Time the growth hot path')
    parser.add_argument('--quiet', action='store_true', help='Suppress progress output')
    return parser.parse_args(argv)


def apply_overrides(artwork, args):
    overrides = {}
    if args.piece is not None:
        overrides['piece'] = args.piece
    if args.seed is not None:
        overrides['seed'] = args.seed
    if args.line_count is not None:
        overrides['line_count'] = args.line_count
    if args.palette is not None:
        overrides['palette'] = args.palette
    if args.profile:
        overrides['profile'] = True
    if args.quiet:
        overrides['verbose'] = False
    if args.png:
        overrides['render'] = replace(artwork.render, write_png=True)
    return replace(artwork, **overrides)


def write_outputs(artwork, result):
    render_config = artwork.render

    svg = SVGRenderer(str(artwork.svg_path), result.bounds, render_config, result.background)
    draw(result, svg)

    if render_config.write_png:
        raster = RasterRenderer(result.bounds, render_config, result.background,
                                output_path=str(artwork.png_path))
        draw(result, raster)

    if render_config.write_paths_data and result.paths:
        export_paths(result.paths, result.bounds, str(artwork.paths_data_path),
                     metadata={'piece': artwork.piece, 'seed': artwork.seed})

    export_report(result.stats, str(artwork.stats_path))
    save_config(artwork, str(artwork.config_snapshot_path))


def save_preview(artwork, result, show: bool = False):
    visualize_paths(
        result.paths,
        result.bounds,
        occupants=result.blobs or None,
        rectangles=result.rectangles or None,
        background=result.background or 'white',
        save_path=str(artwork.preview_path),
        show=show
    )


def main(argv=None):
    args = parse_args(argv)
    if not args.show:
        matplotlib.use('Agg')

    artwork = apply_overrides(load_config(args.config), args)
    artwork.create_output_dirs()
    profiler.enabled = artwork.profile

    if artwork.verbose:
        print(f"Piece: {artwork.piece} (seed {artwork.seed}, palette {artwork.palette})")
        print(f"Output: {artwork.output_dir}")
        print()

    with profile_block('generate'):
        result = generate(artwork)
    with profile_block('write_outputs'):
        write_outputs(artwork, result)

    if args.preview or args.show:
        save_preview(artwork, result, show=args.show)

    if artwork.profile:
        profiler.report()

    return result


if __name__ == '__main__':
    main()
