"""Simulation package for Game of Life."""

from terminal_life.simulation.history import HistoryTracker
from terminal_life.simulation.life_rules import LifeRules, next_generation
from terminal_life.simulation.simulator import Simulation

__all__ = ["HistoryTracker", "LifeRules", "Simulation", "next_generation"]
