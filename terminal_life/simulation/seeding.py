"""Random sources for the initial grid.

A random source is any zero-argument callable returning a bool. The grid
calls it once per cell in row-major order.
"""

from typing import Callable, Iterable, Iterator, Optional

import numpy as np

from terminal_life.config import DEFAULT_DENSITY

RandomSource = Callable[[], bool]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """NumPy generator, reproducible when ``seed`` is given."""
    return np.random.default_rng(seed)


def density_source(
    density: float = DEFAULT_DENSITY, rng: Optional[np.random.Generator] = None
) -> RandomSource:
    """
    Each cell is alive with probability ``density``.

    Args:
        density: Probability of each cell being alive (0.0 to 1.0).
        rng: Generator to draw from; a fresh unseeded one by default.
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be within 0.0-1.0, got {density}")
    rng = rng if rng is not None else make_rng()

    def source() -> bool:
        return bool(rng.random() < density)

    return source


class ScatterSource:
    """
    Scatters a random number of live cells over the grid.

    Draws a count in ``[n, n*n // 5)`` for ``n = max(width, height)`` and
    marks that many uniformly chosen cells alive. The same cell may be drawn
    twice, so the live count can come out lower. On small grids where that
    range is empty the upper bound becomes ``n + 1``.
    """

    def __init__(
        self, width: int, height: int, rng: Optional[np.random.Generator] = None
    ):
        self.width = width
        self.height = height
        rng = rng if rng is not None else make_rng()

        n = max(width, height)
        high = max(n * n // 5, n + 1)
        self.seed_count = int(rng.integers(n, high))

        self.mask = np.zeros((height, width), dtype=bool)
        rows = rng.integers(0, height, size=self.seed_count)
        cols = rng.integers(0, width, size=self.seed_count)
        self.mask[rows, cols] = True

        self._cells: Iterator[bool] = iter(self.mask.ravel().tolist())

    def __call__(self) -> bool:
        try:
            return next(self._cells)
        except StopIteration:
            raise RuntimeError(
                f"Scatter source exhausted after {self.width * self.height} cells"
            ) from None


def fixed_source(values: Iterable) -> RandomSource:
    """Replay ``values`` one per call; handy for known layouts."""
    cells = iter(values)

    def source() -> bool:
        return bool(next(cells))

    return source
