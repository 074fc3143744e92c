import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'walls_engine' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def resolve_params(args):
    from walls_engine.core.params import GameParams, Difficulty, default_params
    if args.params:
        params = GameParams.decode(args.params)
    else:
        base = default_params()
        params = GameParams(
            args.width if args.width is not None else base.width,
            args.height if args.height is not None else base.height,
            Difficulty.from_name(args.difficulty) if args.difficulty else base.difficulty,
        )
    return params.validate()

def add_params_arguments(parser):
    parser.add_argument("--params", type=str, help="Parameter string, e.g. 5x4de")
    parser.add_argument("--width", type=int, default=None, help="Board Width")
    parser.add_argument("--height", type=int, default=None, help="Board Height")
    parser.add_argument("--difficulty", type=str, default=None, choices=["easy", "tricky", "hard"], help="Difficulty")

def main(argv=None):
    parser = argparse.ArgumentParser(description="Walls: single-path wall puzzle generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate new puzzles")
    add_params_arguments(gen_parser)
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--count", type=int, default=1, help="Number of puzzles")
    gen_parser.add_argument("--max-steps", type=int, default=None, help="Give up on a path after this many backbite steps")
    gen_parser.add_argument("--show", action="store_true", help="Print the board as text")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle descriptor")
    add_params_arguments(solve_parser)
    solve_parser.add_argument("descriptor", help="Puzzle descriptor")

    # Validate Command
    val_parser = subparsers.add_parser("validate", help="Check a puzzle descriptor")
    add_params_arguments(val_parser)
    val_parser.add_argument("descriptor", help="Puzzle descriptor")

    # Presets Command
    subparsers.add_parser("presets", help="List parameter presets")

    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("walls_engine")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            return run_generate(args, logger)
        elif args.command == "solve":
            return run_solve(args, logger)
        elif args.command == "validate":
            return run_validate(args, logger)
        elif args.command == "presets":
            from walls_engine.core.params import PRESETS
            for p in PRESETS:
                print(f"{p.name:<16} {p.encode()}")
            return 0
    except ValueError as e:
        logger.error(str(e))
        return 2

def run_generate(args, logger):
    import random
    from walls_engine.algo.puzzle import PuzzleGenerator
    from walls_engine.algo.base import GenerationStalled
    from walls_engine.core.grid import WallGrid
    from walls_engine.core.state import PuzzleState
    from walls_engine.core.stats import PuzzleStats

    params = resolve_params(args)
    logger.info(f"Generating {args.count} puzzle(s) {params.name}...")
    rng = random.Random(args.seed)

    for _ in range(args.count):
        grid = WallGrid(params.width, params.height)
        generator = PuzzleGenerator(grid, rng=rng, max_steps=args.max_steps,
                                    difficulty=params.difficulty)
        t0 = time.time()
        try:
            generator.run_all()
        except GenerationStalled as e:
            logger.warning(f"{e}; retry with another seed")
            return 1
        logger.info(f"Generated in {time.time() - t0:.4f}s")

        stats = PuzzleStats.calculate_stats(grid, generator.walls)
        logger.info(f"Stats: {stats}")

        print(f"{params.encode()}:{generator.descriptor}")
        if args.show:
            state = PuzzleState.from_descriptor(params, generator.descriptor)
            print(state.format_text())
    return 0

def run_solve(args, logger):
    from walls_engine.algo.checker import Verdict
    from walls_engine.algo.solver import solve_grid
    from walls_engine.core.state import PuzzleState

    params, desc = split_descriptor(args)
    state = PuzzleState.from_descriptor(params, desc)
    logger.info(f"Loaded {params.name} puzzle")

    result = solve_grid(state.grid, state.clues.fixed)
    logger.debug(f"Propagation settled after {result.sweeps} sweeps")
    print(state.solved(result).format_text())
    if result.verdict == Verdict.AMBIGUOUS:
        print("Not yet uniquely determined.")
    else:
        print(result.verdict.name.title())
    return 0 if result.verdict == Verdict.SOLVABLE else 1

def run_validate(args, logger):
    from walls_engine.core.grid import WallGrid
    from walls_engine.io.descriptor import validate_descriptor

    params, desc = split_descriptor(args)
    validate_descriptor(desc, WallGrid(params.width, params.height).wall_count)
    print("OK")
    return 0

def split_descriptor(args):
    """Accepts either a bare descriptor or the 'params:descriptor' game id form."""
    from walls_engine.core.params import GameParams
    desc = args.descriptor
    if ":" in desc:
        prefix, desc = desc.split(":", 1)
        return GameParams.decode(prefix).validate(), desc
    return resolve_params(args), desc

if __name__ == "__main__":
    sys.exit(main())
