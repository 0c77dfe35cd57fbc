"""Grid representation for Game of Life."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Sequence, Union

import numpy as np

from terminal_life.errors import InvalidDimension, OutOfBounds

logger = logging.getLogger(__name__)

Row = Union[str, Sequence[int], Sequence[bool]]


def _check_dimensions(width, height) -> None:
    if not isinstance(width, (int, np.integer)) or not isinstance(
        height, (int, np.integer)
    ):
        raise InvalidDimension(width, height)
    if isinstance(width, bool) or isinstance(height, bool):
        raise InvalidDimension(width, height)
    if width <= 0 or height <= 0:
        raise InvalidDimension(width, height)


@dataclass(eq=False)
class Grid:
    """
    A fixed-size Game of Life grid.

    Cells are stored in a boolean array of shape ``(height, width)``.
    Neighbors outside the grid count as dead: edges do not wrap.
    """

    width: int
    height: int
    cells: np.ndarray = field(default=None, repr=False)

    def __post_init__(self):
        """Validate dimensions and allocate the cells array."""
        _check_dimensions(self.width, self.height)
        if self.cells is None:
            self.cells = np.zeros((self.height, self.width), dtype=bool)
        elif self.cells.shape != (self.height, self.width):
            raise ValueError(
                f"Cells shape {self.cells.shape} doesn't match grid size "
                f"{(self.height, self.width)}"
            )
        else:
            self.cells = self.cells.astype(bool, copy=False)

    @classmethod
    def create(cls, width: int, height: int, seed_fn: Callable[[], bool]) -> "Grid":
        """
        Build a grid whose cells are produced by ``seed_fn``.

        ``seed_fn`` is called exactly once per cell, in row-major order.

        Args:
            width: Number of columns.
            height: Number of rows.
            seed_fn: Zero-argument callable returning the initial cell state.

        Raises:
            InvalidDimension: If width or height is not positive.
        """
        grid = cls(width, height)
        for row in range(height):
            for col in range(width):
                grid.cells[row, col] = bool(seed_fn())
        logger.debug(
            "Created %dx%d grid with %d live cells",
            width,
            height,
            grid.count_live_cells(),
        )
        return grid

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        """Create an all-dead grid."""
        return cls(width, height)

    @classmethod
    def from_rows(cls, rows: Iterable[Row]) -> "Grid":
        """
        Create a grid from a list of rows.

        Rows may be sequences of 0/1 or booleans, or strings where ``#``,
        ``O`` or ``1`` mark a live cell.
        """
        parsed: List[List[bool]] = []
        for row in rows:
            if isinstance(row, str):
                parsed.append([ch in "#O1" for ch in row])
            else:
                parsed.append([bool(cell) for cell in row])

        height = len(parsed)
        width = len(parsed[0]) if parsed else 0
        if any(len(row) != width for row in parsed):
            raise ValueError("All rows must have the same length")
        _check_dimensions(width, height)
        return cls(width, height, np.array(parsed, dtype=bool))

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBounds(row, col, self.width, self.height)

    def is_alive(self, row: int, col: int) -> bool:
        """Return whether the cell at (row, col) is alive."""
        self._check_index(row, col)
        return bool(self.cells[row, col])

    def set(self, row: int, col: int, alive: bool) -> None:
        """Set the cell at (row, col)."""
        self._check_index(row, col)
        self.cells[row, col] = bool(alive)

    def neighbor_count(self, row: int, col: int) -> int:
        """
        Count the live neighbors of a cell.

        Args:
            row: Row of the cell.
            col: Column of the cell.

        Returns:
            Number of live neighbors (0-8).
        """
        self._check_index(row, col)
        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                # Cells outside the grid are dead
                if 0 <= nr < self.height and 0 <= nc < self.width:
                    count += int(self.cells[nr, nc])
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Live neighbor counts for every cell, as an int array."""
        cells = self.cells.astype(np.int32)
        padded = np.pad(cells, 1, mode="constant", constant_values=0)

        # Sum of the eight shifted views (slicing beats convolution here)
        return (
            padded[:-2, :-2]
            + padded[:-2, 1:-1]
            + padded[:-2, 2:]  # Top row
            + padded[1:-1, :-2]
            + padded[1:-1, 2:]  # Middle row (no center)
            + padded[2:, :-2]
            + padded[2:, 1:-1]
            + padded[2:, 2:]  # Bottom row
        )

    def equals(self, other: "Grid") -> bool:
        """Cell-wise equality with another grid of the same size."""
        if not isinstance(other, Grid):
            return False
        return (
            self.width == other.width
            and self.height == other.height
            and bool(np.array_equal(self.cells, other.cells))
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def count_live_cells(self) -> int:
        """Count total number of live cells."""
        return int(np.count_nonzero(self.cells))

    def clear(self) -> None:
        """Clear all cells (set to dead)."""
        self.cells.fill(False)

    def place(self, pattern: "Grid", row: int, col: int) -> None:
        """Stamp ``pattern`` with its top-left corner at (row, col), clipped to the grid."""
        for r in range(pattern.height):
            for c in range(pattern.width):
                gr, gc = row + r, col + c
                if 0 <= gr < self.height and 0 <= gc < self.width:
                    self.cells[gr, gc] = pattern.cells[r, c]

    def copy(self) -> "Grid":
        """Create a deep, writable copy of this grid."""
        return Grid(self.width, self.height, self.cells.copy())

    def snapshot(self) -> "Grid":
        """Create a read-only copy of this grid."""
        frozen = self.cells.copy()
        frozen.flags.writeable = False
        return Grid(self.width, self.height, frozen)

    def to_rows(self) -> List[List[int]]:
        """Cells as nested lists of 0/1."""
        return self.cells.astype(np.uint8).tolist()
