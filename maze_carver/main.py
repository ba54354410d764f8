import argparse
import sys
import logging
import random

from maze_carver import config

logger = logging.getLogger("maze_carver")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="maze-carver", description="Maze Carver: recursive backtracker maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it as text")
    gen_parser.add_argument("--width", type=int, default=config.DEFAULT_WIDTH, help="Maze width in cells")
    gen_parser.add_argument("--height", type=int, default=config.DEFAULT_HEIGHT, help="Maze height in cells")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--stats", action="store_true", help="Log passage and dead-end statistics")

    # View Command
    view_parser = subparsers.add_parser("view", help="Open a window showing the maze")
    view_parser.add_argument("--width-px", type=int, default=config.WINDOW_WIDTH, help="Window width in pixels")
    view_parser.add_argument("--height-px", type=int, default=config.WINDOW_HEIGHT, help="Window height in pixels")
    view_parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Cell size in pixels")
    view_parser.add_argument("--seed", type=int, default=None, help="Random Seed (defaults to the current time)")
    view_parser.add_argument("--record", action="store_true", help="Record the session to mp4")

    return parser


def run_generate(args, parser) -> str:
    from maze_carver.core.grid import Grid
    from maze_carver.algo.dfs import RecursiveBacktracker
    from maze_carver.viz.ascii import render_ascii

    try:
        grid = Grid(args.width, args.height)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Generating {args.width}x{args.height} maze (seed={args.seed})...")
    generator = RecursiveBacktracker(grid, seed=args.seed)
    generator.generate()
    logger.debug(f"Peak stack depth: {generator.max_depth}")

    if args.stats:
        from maze_carver.core.analysis import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(grid)
        logger.info(f"Stats: {stats}")

    return render_ascii(grid)


def run_view(args, parser):
    import time
    from maze_carver.core.grid import Grid
    from maze_carver.algo.dfs import RecursiveBacktracker
    from maze_carver.viz.renderer import MazeViewer

    try:
        cols, rows = config.grid_size(args.width_px, args.height_px, args.cell_size)
    except ValueError as e:
        parser.error(str(e))

    # One stream for the whole session so every regeneration differs
    seed = args.seed if args.seed is not None else int(time.time())
    rng = random.Random(seed)
    logger.info(f"Viewer {args.width_px}x{args.height_px}px -> {cols}x{rows} cells (seed={seed})")

    grid = Grid(cols, rows)
    viewer = MazeViewer(
        grid,
        generator_factory=lambda g: RecursiveBacktracker(g, rng=rng),
        width=args.width_px,
        height=args.height_px,
        cell_size=args.cell_size,
        record=args.record,
    )
    viewer.regenerate()

    if args.record:
        logger.info(f"Recording video to {viewer.recorder.output_file}")

    viewer.init_window()
    viewer.run_loop()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        print(run_generate(args, parser))
    elif args.command == "view":
        run_view(args, parser)
    return 0


if __name__ == "__main__":
    sys.exit(main())
