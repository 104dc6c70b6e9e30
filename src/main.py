import argparse
import cProfile
import logging
import sys

from core.errors import ConfigurationError
from render_server.cpu_renderer import CpuRenderer
from render_server.config import DEFAULT_TILE_SIZE
from scenes import SCENES

#------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tiled CPU path tracer")
    parser.add_argument("--scene", default="random", choices=sorted(SCENES),
                        help="Scene to render")
    parser.add_argument("--out", default="image.ppm",
                        help="Output file path (.ppm is written as ASCII P3, anything else via Pillow)")
    parser.add_argument("--width", type=int, help="Override the scene's image width")
    parser.add_argument("--samples", type=int, help="Override the scene's samples per pixel")
    parser.add_argument("--sampling", choices=["stratified", "random"],
                        help="Sub-pixel sampling strategy")
    parser.add_argument("--depth", type=int, help="Override the scene's maximum ray depth")
    parser.add_argument("--workers", type=int,
                        help="Worker threads (default: $PATHTRACER_WORKERS or CPU count)")
    parser.add_argument("--seed", type=lambda s: int(s, 0),
                        help="PRNG seed (default: $PATHTRACER_SEED or the clock)")
    parser.add_argument("--tile-size", type=int, nargs=2, metavar=("ROWS", "COLS"),
                        default=list(DEFAULT_TILE_SIZE), help="Tile size in pixels")
    parser.add_argument("--texture", default="earthmap.jpg", help="Image used by the earth scene")
    parser.add_argument("--preview", action="store_true", help="Show a live preview window")
    parser.add_argument("--profile", metavar="PATH",
                        help="Write cProfile data for the render to PATH")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)

#------------------------------------------------------------------------

def main(argv=None) -> int:
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format='%(levelname)s: %(name)s: %(message)s')

    build = SCENES[args.scene]
    # the earth texture path is resolved relative to the working directory
    scene, cam = build(args.texture) if args.scene == "earth" else build()

    if args.width is not None:
        cam.img_width = args.width
    if args.samples is not None:
        cam.samples_per_pixel = args.samples
    if args.sampling is not None:
        cam.sampling = args.sampling
    if args.depth is not None:
        cam.max_depth = args.depth

    try:
        renderer = CpuRenderer(scene, cam, args.out, workers=args.workers,
                               seed=args.seed, tile_size=tuple(args.tile_size))
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    profiler = None
    if args.profile:
        # only the consumer thread is profiled, workers run outside it
        profiler = cProfile.Profile()
        profiler.enable()

    completed = renderer.render(enable_preview=args.preview)

    if profiler is not None:
        profiler.disable()
        # Save profile data to file for visualization tools
        profiler.dump_stats(args.profile)
        print(f"Profile data written to {args.profile}")

    return 0 if completed else 1

#------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
