"""Simulation driver tying the grid, the rules and the history together."""

import logging
from typing import Iterator, Optional, Tuple

from terminal_life.config import DEFAULT_HISTORY_CAPACITY
from terminal_life.models.generation import Generation, TerminationState
from terminal_life.models.grid import Grid
from terminal_life.simulation.history import HistoryTracker
from terminal_life.simulation.life_rules import LifeRules
from terminal_life.simulation.seeding import RandomSource

logger = logging.getLogger(__name__)

Step = Tuple[Generation, TerminationState]


class Simulation:
    """
    Runs Game of Life one generation at a time.

    The live grid belongs to the simulation alone; callers only ever see
    read-only :class:`Generation` snapshots. Generation 0 is recorded in the
    history at construction, so a seed that is already stable is reported
    on the first step.
    """

    def __init__(
        self,
        width: int,
        height: int,
        random_source: RandomSource,
        history_capacity: int = DEFAULT_HISTORY_CAPACITY,
    ):
        """
        Seed a new simulation.

        Args:
            width: Number of columns.
            height: Number of rows.
            random_source: Callable producing one initial cell state per call.
            history_capacity: Longest oscillation period to detect.

        Raises:
            InvalidDimension: If width or height is not positive.
        """
        self._start(Grid.create(width, height, random_source), history_capacity)

    @classmethod
    def from_grid(
        cls, grid: Grid, history_capacity: int = DEFAULT_HISTORY_CAPACITY
    ) -> "Simulation":
        """Start from a copy of an explicit grid."""
        simulation = cls.__new__(cls)
        simulation._start(grid.copy(), history_capacity)
        return simulation

    def _start(self, grid: Grid, history_capacity: int) -> None:
        self._grid = grid
        self._history = HistoryTracker(history_capacity)
        self._current = Generation.capture(0, self._grid)
        self._history.record(self._current)
        logger.debug(
            "Simulation started on %dx%d grid, %d live cells, history %d",
            grid.width,
            grid.height,
            self._current.live_cells,
            history_capacity,
        )

    @property
    def current(self) -> Generation:
        """The latest generation."""
        return self._current

    @property
    def generation(self) -> int:
        """Index of the latest generation."""
        return self._current.index

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def step(self) -> Step:
        """
        Advance by one generation.

        Returns:
            The new generation and the termination state it produced.
        """
        self._grid = LifeRules.next_generation(self._grid)
        self._current = Generation.capture(self._current.index + 1, self._grid)
        state = self._history.record(self._current)
        return self._current, state

    def run(
        self, max_generations: Optional[int] = None, detect_steady: bool = False
    ) -> Iterator[Step]:
        """
        Lazily step the simulation.

        Stops after ``max_generations`` steps when given, and after the
        first non-running state when ``detect_steady`` is set (that step is
        still yielded). Otherwise the sequence never ends; stop pulling to
        cancel.

        Raises:
            ValueError: If ``max_generations`` is negative.
        """
        if max_generations is not None and max_generations < 0:
            raise ValueError(
                f"Max generations cannot be negative, got {max_generations}"
            )
        return self._run(max_generations, detect_steady)

    def _run(self, max_generations: Optional[int], detect_steady: bool) -> Iterator[Step]:
        steps = 0
        while max_generations is None or steps < max_generations:
            generation, state = self.step()
            steps += 1
            yield generation, state
            if detect_steady and not state.is_running:
                logger.debug(
                    "Stopping at generation %d: %s", generation.index, state.describe()
                )
                return
