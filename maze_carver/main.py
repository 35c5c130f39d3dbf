import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_carver' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.grid import Grid, MazeError
from maze_carver.algo.backtracker import RecursiveBacktracker
from maze_carver.viz.ascii import AsciiRenderer, animate

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10
DEFAULT_DELAY = 0.04

logger = logging.getLogger("maze_carver")

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr
    )

def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value

def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --height, so help is registered by hand
    parser = argparse.ArgumentParser(
        description="Maze Carver: perfect mazes by recursive backtracking, drawn in ASCII",
        add_help=False
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("-w", "--width", type=positive_int, default=DEFAULT_WIDTH,
                        help=f"Width of maze (default: {DEFAULT_WIDTH})")
    parser.add_argument("-h", "--height", type=positive_int, default=DEFAULT_HEIGHT,
                        help=f"Height of maze (default: {DEFAULT_HEIGHT})")
    parser.add_argument("-s", "--seed", type=int, default=None,
                        help="Random seed; a fixed value gives reproducible output (default: current time)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--inspect", action="store_true", help="Also dump raw cell values")
    parser.add_argument("--stats", action="store_true", help="Log dead end / junction statistics")
    parser.add_argument("--animate", action="store_true", help="Animate carving in the terminal")
    parser.add_argument("--delay", type=float, default=DEFAULT_DELAY,
                        help=f"Seconds between animation frames (default: {DEFAULT_DELAY})")
    parser.add_argument("--visual", action="store_true", help="Watch carving in a pygame window")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    seed = args.seed
    if seed is None:
        seed = int(time.time())

    logger.info(f"Generating {args.width}x{args.height} maze (seed={seed})...")

    try:
        grid = Grid(args.width, args.height)
        generator = RecursiveBacktracker(grid, seed=seed)

        if args.visual:
            from maze_carver.viz.window import MazeWindow
            window = MazeWindow(grid, generator=generator, seed=seed)
            window.init_window()
            window.run_loop()
            window.finish_generation()
        elif args.animate:
            animate(generator, seed=seed, delay=args.delay)
        else:
            generator.run_all()
    except MazeError as e:
        logger.error(f"Maze generation failed: {e}")
        return 2

    if not args.animate:
        sys.stdout.write(AsciiRenderer(grid, seed=seed).draw())

    if args.inspect:
        sys.stdout.write("\n" + grid.inspect() + "\n")

    if args.stats:
        from maze_carver.core.complexity import MazeStats
        stats = MazeStats.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
