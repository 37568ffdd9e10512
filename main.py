#!/usr/bin/env python3
"""
SkyTracer - A small Python Ray Tracer

Main entry point for rendering scenes. The image goes to stdout as PPM
unless --output names a file; everything else is printed to stderr.
"""

import argparse
import dataclasses
import sys
import time
from pathlib import Path

from skytracer.camera import Camera
from skytracer.output import is_supported_output, save_image, write_ppm
from skytracer.renderer import Renderer, RenderSettings, SHADING_MODES
from skytracer.scene_parser import SceneParseError, default_scene, load_scene


def log(message: str = '', end: str = '\n') -> None:
    print(message, end=end, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='SkyTracer - A small Python Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py > image.ppm
  python main.py --samples 10 --output render.png
  python main.py --scene scene.yaml --shading normals --output normals.png
        '''
    )

    parser.add_argument('--scene', type=str, default=None,
                        help='YAML or JSON scene file (default: built-in two-sphere scene)')
    parser.add_argument('--width', type=int, default=None, help='Image width (default: 400)')
    parser.add_argument('--samples', type=int, default=None, help='Samples per pixel (default: 100)')
    parser.add_argument('--depth', type=int, default=None, help='Max ray depth (default: 50)')
    parser.add_argument('--shading', type=str, default=None, choices=SHADING_MODES,
                        help='Shading mode (default: diffuse)')
    parser.add_argument('--no-jitter', action='store_true',
                        help='Sample pixel corners instead of random points in the pixel')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a reproducible render')
    parser.add_argument('--output', type=str, default='-',
                        help="Output filename, or '-' for PPM on stdout (default: -)")
    return parser


def apply_overrides(settings: RenderSettings, args: argparse.Namespace) -> RenderSettings:
    """Return settings with any command-line flags applied on top."""
    overrides = {}
    if args.width is not None:
        overrides['width'] = args.width
        overrides['height'] = None
    if args.samples is not None:
        overrides['samples_per_pixel'] = args.samples
    if args.depth is not None:
        overrides['max_depth'] = args.depth
    if args.shading is not None:
        overrides['shading'] = args.shading
    if args.no_jitter:
        overrides['jitter'] = False
    if args.seed is not None:
        overrides['seed'] = args.seed
    return dataclasses.replace(settings, **overrides)


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        if args.scene:
            world, camera, settings = load_scene(args.scene)
        else:
            world, camera, settings = default_scene(), Camera(), RenderSettings()
        settings = apply_overrides(settings, args)
    except (SceneParseError, ValueError) as e:
        log(f"Error: {e}")
        return 1

    if args.output != '-' and not is_supported_output(args.output):
        log(f"Error: Unsupported output format: {Path(args.output).suffix or args.output}")
        return 1

    log("=" * 60)
    log("SkyTracer")
    log("=" * 60)
    log("Render Settings:")
    log(f"  Resolution: {settings.width}x{settings.height}")
    log(f"  Samples: {settings.samples_per_pixel}")
    log(f"  Max Depth: {settings.max_depth}")
    log(f"  Shading: {settings.shading}")
    log(f"  Objects in scene: {len(world)}")

    renderer = Renderer(settings)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '#' * filled + '.' * (bar_len - filled)
            log(f'\rRendering: [{bar}] {pct}%', end='')

    renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    image = renderer.render(world, camera)
    elapsed = time.time() - start_time
    log(f"\nRender completed in {elapsed:.2f} seconds")

    if args.output == '-':
        write_ppm(image, sys.stdout)
    else:
        log(f"Saving to: {Path(args.output)}")
        try:
            save_image(image, args.output)
        except (ValueError, OSError) as e:
            log(f"Error: {e}")
            return 1

    log("Done")
    return 0


if __name__ == '__main__':
    sys.exit(main())
