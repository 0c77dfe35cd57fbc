"""Conway's Game of Life in the terminal."""

from terminal_life.errors import InvalidDimension, LifeError, OutOfBounds
from terminal_life.models import Generation, Grid, TerminationKind, TerminationState
from terminal_life.simulation import HistoryTracker, LifeRules, Simulation

__version__ = "0.1.0"

__all__ = [
    "Generation",
    "Grid",
    "HistoryTracker",
    "InvalidDimension",
    "LifeError",
    "LifeRules",
    "OutOfBounds",
    "Simulation",
    "TerminationKind",
    "TerminationState",
]
