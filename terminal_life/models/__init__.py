"""Models package for the Game of Life runner."""

from terminal_life.models.grid import Grid
from terminal_life.models.generation import (
    Generation,
    TerminationKind,
    TerminationState,
)

__all__ = ["Grid", "Generation", "TerminationKind", "TerminationState"]
