"""Well-known starting patterns."""

from typing import Dict, List

from terminal_life.models.grid import Grid

PATTERNS: Dict[str, List[str]] = {
    "block": [
        "##",
        "##",
    ],
    "blinker": [
        "#",
        "#",
        "#",
    ],
    "glider": [
        ".#.",
        "..#",
        "###",
    ],
    # Takes 5206 generations to stabilize on an unbounded plane
    "acorn": [
        ".#.....",
        "...#...",
        "##..###",
    ],
    # Chaotic growth
    "rpentomino": [
        ".##",
        "##.",
        ".#.",
    ],
}


def pattern_names() -> List[str]:
    return sorted(PATTERNS)


def pattern(name: str) -> Grid:
    """The named pattern as a grid of its own size."""
    return Grid.from_rows(PATTERNS[name])


def pattern_grid(name: str, width: int, height: int) -> Grid:
    """
    An empty ``width`` x ``height`` grid with the named pattern near the centre.

    Parts of the pattern falling outside a small grid are clipped.

    Raises:
        KeyError: If ``name`` is not a known pattern.
    """
    shape = pattern(name)
    grid = Grid.empty(width, height)
    grid.place(shape, (height - shape.height) // 2, (width - shape.width) // 2)
    return grid
