"""Main entry point for the Game of Life runner."""

import argparse
import logging
import sys
from typing import List, Optional

from terminal_life import __version__
from terminal_life.config import (
    DEFAULT_CELL_SIZE,
    DEFAULT_DENSITY,
    DEFAULT_FPS,
    DEFAULT_FRAME_DELAY_MS,
    DEFAULT_GRID_SIZE,
    DEFAULT_HISTORY_CAPACITY,
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    SEEDING_STYLES,
    LifeConfig,
)
from terminal_life.errors import InvalidDimension
from terminal_life.models.generation import TerminationState
from terminal_life.renderers.terminal import TerminalRenderer
from terminal_life.simulation.patterns import pattern_grid, pattern_names
from terminal_life.simulation.seeding import ScatterSource, density_source, make_rng
from terminal_life.simulation.simulator import Simulation

logger = logging.getLogger(__name__)


def grid_size(value: str) -> int:
    """Argparse type for the grid size."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"`{value}` isn't a valid number")

    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise argparse.ArgumentTypeError(
            f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, "
            f"but got {size}"
        )
    return size


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="terminal-life",
        description="Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 30x30 grid until Ctrl-C
  terminal-life

  # Stop once the grid settles or starts repeating
  terminal-life --grid-size 50 --exit-steady

  # Reproducible run in a window
  terminal-life --seed 42 --window
        """,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--grid-size",
        "-g",
        type=grid_size,
        default=DEFAULT_GRID_SIZE,
        help=f"Grid size for the simulation (default: {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument(
        "--exit-steady",
        "-e",
        action="store_true",
        help="Detect and stop at steady state or oscillation",
    )
    parser.add_argument(
        "--max-generations",
        type=int,
        default=None,
        help="Stop after this many generations",
    )
    parser.add_argument(
        "--history",
        type=int,
        default=DEFAULT_HISTORY_CAPACITY,
        help="Longest oscillation period to detect "
        f"(default: {DEFAULT_HISTORY_CAPACITY})",
    )

    # Seeding options
    parser.add_argument(
        "--seeding",
        choices=SEEDING_STYLES,
        default="scatter",
        help="How random cells are placed (default: scatter)",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_DENSITY,
        help="Cell density for density seeding (0.0-1.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run",
    )
    parser.add_argument(
        "--pattern",
        choices=pattern_names(),
        default=None,
        help="Start from a named pattern instead of random cells",
    )

    # Display options
    parser.add_argument(
        "--delay",
        type=int,
        default=DEFAULT_FRAME_DELAY_MS,
        help=f"Milliseconds between terminal frames (default: {DEFAULT_FRAME_DELAY_MS})",
    )
    parser.add_argument(
        "--window",
        action="store_true",
        help="Draw in a pygame window instead of the terminal",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help="Size of each cell in pixels (window only)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_FPS,
        help="Target frames per second (window only)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr",
    )
    return parser


def create_config_from_args(args: argparse.Namespace) -> LifeConfig:
    """Create a LifeConfig from parsed arguments."""
    return LifeConfig.square(
        args.grid_size,
        exit_on_steady=args.exit_steady,
        max_generations=args.max_generations,
        history_capacity=args.history,
        seeding=args.seeding,
        density=args.density,
        seed=args.seed,
        pattern=args.pattern,
        frame_delay_ms=args.delay,
        window=args.window,
        cell_size=args.cell_size,
        fps=args.fps,
    )


def create_simulation(config: LifeConfig) -> Simulation:
    """Seed a simulation as the config describes."""
    if config.pattern is not None:
        grid = pattern_grid(config.pattern, config.grid_width, config.grid_height)
        return Simulation.from_grid(grid, config.history_capacity)

    rng = make_rng(config.seed)
    if config.seeding == "density":
        source = density_source(config.density, rng)
    else:
        source = ScatterSource(config.grid_width, config.grid_height, rng)
    return Simulation(
        config.grid_width, config.grid_height, source, config.history_capacity
    )


def create_renderer(config: LifeConfig):
    """Terminal renderer, or the pygame window when asked for."""
    if config.window:
        from terminal_life.renderers.pygame_grid import PygameGridRenderer

        return PygameGridRenderer(config)
    return TerminalRenderer(config)


def termination_message(index: int, state: TerminationState) -> str:
    if state.period is not None:
        return (
            f"Repeating state detected (period {state.period}). "
            f"Terminating at iteration {index}."
        )
    return f"Repeating or steady state detected. Terminating at iteration {index}."


def run_simulation(config: LifeConfig, simulation: Simulation, renderer) -> int:
    """
    Drive the render loop until the run ends or the user quits.

    Returns:
        Index of the last generation shown.
    """
    steps = simulation.run(
        max_generations=config.max_generations,
        detect_steady=config.exit_on_steady,
    )
    generation, state = simulation.current, TerminationState.running()
    paused = False

    try:
        while True:
            result = renderer.render(generation, state, paused)

            if result.should_quit:
                break
            if result.toggle_pause:
                paused = not paused
            if paused and not result.step_once:
                continue

            try:
                generation, state = next(steps)
            except StopIteration:
                break
    finally:
        renderer.cleanup()

    if config.exit_on_steady and not state.is_running:
        print(termination_message(generation.index, state))
    return generation.index


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = create_config_from_args(args)
    try:
        config.validate()
        simulation = create_simulation(config)
    except (InvalidDimension, ValueError) as exc:
        parser.error(str(exc))

    renderer = create_renderer(config)
    try:
        last = run_simulation(config, simulation, renderer)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 0

    logger.debug("Run finished at generation %d", last)
    return 0


if __name__ == "__main__":
    sys.exit(main())
