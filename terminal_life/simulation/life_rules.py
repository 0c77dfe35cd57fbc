"""Game of Life rules implementation using NumPy for efficiency."""

import numpy as np

from terminal_life.models.grid import Grid


class LifeRules:
    """
    Implements Conway's Game of Life rules (B3/S23).

    Rules:
    1. Any live cell with 2 or 3 live neighbors survives.
    2. Any dead cell with exactly 3 live neighbors becomes alive.
    3. All other cells die or stay dead.
    """

    @staticmethod
    def next_generation(grid: Grid) -> Grid:
        """
        Compute the next generation.

        The input grid is left untouched.

        Args:
            grid: Current grid.

        Returns:
            New Grid of the same size holding the next generation.
        """
        cells = grid.cells
        neighbors = grid.neighbor_counts()

        survives = cells & ((neighbors == 2) | (neighbors == 3))
        born = ~cells & (neighbors == 3)

        return Grid(grid.width, grid.height, survives | born)


def next_generation(grid: Grid) -> Grid:
    """Module-level shortcut for :meth:`LifeRules.next_generation`."""
    return LifeRules.next_generation(grid)


def is_still_life(grid: Grid) -> bool:
    """Whether ``grid`` is unchanged by one step."""
    return bool(np.array_equal(LifeRules.next_generation(grid).cells, grid.cells))
