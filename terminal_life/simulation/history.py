"""Steady-state and oscillation detection over a bounded history."""

import logging
from collections import deque
from typing import Deque

from terminal_life.config import DEFAULT_HISTORY_CAPACITY
from terminal_life.models.generation import Generation, TerminationState

logger = logging.getLogger(__name__)


class HistoryTracker:
    """
    Remembers the last few generations to spot repeats.

    The window holds at most ``capacity`` earlier generations, so an
    oscillation with a period longer than ``capacity`` goes unnoticed.
    Memory stays at ``capacity`` grid copies however long the run.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._window: Deque[Generation] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._window)

    def record(self, generation: Generation) -> TerminationState:
        """
        Add ``generation`` and report whether the run has settled.

        The newest generation is compared with the retained ones, nearest
        first: a match one step back is a steady state, a match ``d`` steps
        back is an oscillation with period ``d``.

        Args:
            generation: The generation just computed.

        Returns:
            The termination state after this generation.
        """
        state = TerminationState.running()
        for distance, earlier in enumerate(reversed(self._window), start=1):
            if generation.same_cells(earlier):
                if distance == 1:
                    state = TerminationState.steady()
                else:
                    state = TerminationState.oscillating(distance)
                logger.debug(
                    "Generation %d repeats generation %d: %s",
                    generation.index,
                    earlier.index,
                    state.describe(),
                )
                break

        if len(self._window) == self._capacity:
            logger.debug("Evicting generation %d from history", self._window[0].index)
        self._window.append(generation)
        return state

    def clear(self) -> None:
        """Forget all recorded generations."""
        self._window.clear()
