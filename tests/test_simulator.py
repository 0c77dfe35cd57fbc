import itertools

import pytest

from terminal_life.errors import InvalidDimension
from terminal_life.models.generation import TerminationKind, TerminationState
from terminal_life.models.grid import Grid
from terminal_life.simulation.seeding import fixed_source
from terminal_life.simulation.simulator import Simulation

VERTICAL_BLINKER = [[0, 1, 0], [0, 1, 0], [0, 1, 0]]
HORIZONTAL_BLINKER = [[0, 0, 0], [1, 1, 1], [0, 0, 0]]


def _blinker_simulation():
    cells = itertools.chain.from_iterable(VERTICAL_BLINKER)
    return Simulation(3, 3, fixed_source(cells))


def test_new_simulation_starts_at_generation_zero():
    simulation = _blinker_simulation()
    assert simulation.generation == 0
    assert simulation.current.grid.to_rows() == VERTICAL_BLINKER
    assert (simulation.width, simulation.height) == (3, 3)


def test_invalid_dimension_surfaces_at_construction():
    with pytest.raises(InvalidDimension):
        Simulation(0, 3, lambda: True)


def test_step_advances_generation():
    simulation = _blinker_simulation()

    generation, state = simulation.step()
    assert generation.index == 1
    assert generation.grid.to_rows() == HORIZONTAL_BLINKER
    assert state.is_running

    generation, state = simulation.step()
    assert generation.index == 2
    assert generation.grid.to_rows() == VERTICAL_BLINKER
    assert state == TerminationState.oscillating(2)


def test_snapshots_are_not_aliased_to_live_grid():
    simulation = _blinker_simulation()
    first, _ = simulation.step()
    simulation.step()
    assert first.grid.to_rows() == HORIZONTAL_BLINKER


def test_from_grid_copies_the_grid():
    grid = Grid.from_rows(["....", ".##.", ".##.", "...."])
    simulation = Simulation.from_grid(grid)
    grid.clear()
    assert simulation.current.live_cells == 4


def test_still_life_reports_steady_state_on_first_step():
    grid = Grid.from_rows(["....", ".##.", ".##.", "...."])
    steps = list(Simulation.from_grid(grid).run(detect_steady=True))
    assert len(steps) == 1
    generation, state = steps[0]
    assert generation.index == 1
    assert state.kind is TerminationKind.STEADY_STATE


def test_run_stops_on_oscillation_when_detecting():
    steps = list(_blinker_simulation().run(detect_steady=True))
    assert [g.index for g, _ in steps] == [1, 2]
    assert steps[-1][1] == TerminationState.oscillating(2)


def test_run_honours_max_generations():
    simulation = _blinker_simulation()
    steps = list(simulation.run(max_generations=5))
    assert [g.index for g, _ in steps] == [1, 2, 3, 4, 5]
    assert simulation.generation == 5


def test_run_without_limits_is_lazy_and_unbounded():
    simulation = _blinker_simulation()
    steps = simulation.run()
    taken = list(itertools.islice(steps, 50))
    assert len(taken) == 50
    assert simulation.generation == 50


def test_run_with_zero_max_generations_yields_nothing():
    assert list(_blinker_simulation().run(max_generations=0)) == []


def test_run_rejects_negative_max_generations():
    with pytest.raises(ValueError):
        _blinker_simulation().run(max_generations=-1)


def test_dying_pattern_ends_in_steady_state():
    grid = Grid.from_rows(["#....", ".....", "....#"])
    steps = list(Simulation.from_grid(grid).run(max_generations=10, detect_steady=True))
    assert [g.index for g, _ in steps] == [1, 2]
    assert steps[0][0].live_cells == 0
    assert steps[-1][1].kind is TerminationKind.STEADY_STATE
