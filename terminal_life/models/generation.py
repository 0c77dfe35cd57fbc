"""Generation snapshots and termination states."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from terminal_life.models.grid import Grid


class TerminationKind(Enum):
    """How a simulation stands after the latest generation."""

    RUNNING = "running"
    STEADY_STATE = "steady_state"
    OSCILLATING = "oscillating"


@dataclass(frozen=True)
class TerminationState:
    """Termination verdict for one generation."""

    kind: TerminationKind
    period: Optional[int] = None

    @classmethod
    def running(cls) -> "TerminationState":
        return cls(TerminationKind.RUNNING)

    @classmethod
    def steady(cls) -> "TerminationState":
        return cls(TerminationKind.STEADY_STATE)

    @classmethod
    def oscillating(cls, period: int) -> "TerminationState":
        if period < 2:
            raise ValueError(f"Oscillation period must be at least 2, got {period}")
        return cls(TerminationKind.OSCILLATING, period)

    @property
    def is_running(self) -> bool:
        return self.kind is TerminationKind.RUNNING

    def describe(self) -> str:
        """Short human-readable label."""
        if self.kind is TerminationKind.OSCILLATING:
            return f"oscillating (period {self.period})"
        if self.kind is TerminationKind.STEADY_STATE:
            return "steady state"
        return "running"


@dataclass(frozen=True, eq=False)
class Generation:
    """
    Immutable snapshot of the grid at a generation index.

    The grid is a private read-only copy, so later changes to the live
    grid never show up in a recorded generation.
    """

    index: int
    grid: Grid

    @classmethod
    def capture(cls, index: int, grid: Grid) -> "Generation":
        """Snapshot ``grid`` as generation ``index``."""
        return cls(index, grid.snapshot())

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def live_cells(self) -> int:
        return self.grid.count_live_cells()

    def same_cells(self, other: "Generation") -> bool:
        """Whether both generations hold the same cell pattern."""
        return self.grid.equals(other.grid)
