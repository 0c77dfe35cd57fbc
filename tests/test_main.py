import pytest

from terminal_life.config import LifeConfig
from terminal_life.main import (
    build_parser,
    create_config_from_args,
    create_simulation,
    main,
    run_simulation,
)
from terminal_life.models.grid import Grid
from terminal_life.renderers.render_result import RenderResult
from terminal_life.simulation.simulator import Simulation


class ScriptedRenderer:
    """Records frames and replays a list of input results."""

    def __init__(self, results=()):
        self.results = list(results)
        self.frames = []
        self.cleaned_up = False

    def render(self, generation, state=None, paused=False):
        self.frames.append((generation.index, paused))
        if self.results:
            return self.results.pop(0)
        return RenderResult()

    def cleanup(self):
        self.cleaned_up = True


def test_defaults():
    args = build_parser().parse_args([])
    config = create_config_from_args(args)
    assert (config.grid_width, config.grid_height) == (30, 30)
    assert not config.exit_on_steady
    assert config.history_capacity == 10
    assert config.frame_delay_ms == 50


def test_short_flags():
    args = build_parser().parse_args(["-g", "12", "-e"])
    assert args.grid_size == 12
    assert args.exit_steady


@pytest.mark.parametrize("value", ["0", "101", "abc"])
def test_grid_size_validation(value, capsys):
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["--grid-size", value])
    assert exc_info.value.code == 2
    assert "grid-size" in capsys.readouterr().err


def test_bad_config_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main(["--density", "2", "--seeding", "density"])
    assert exc_info.value.code == 2


def test_create_simulation_is_reproducible_with_seed():
    for seeding in ("scatter", "density"):
        config = LifeConfig.square(15, seed=9, seeding=seeding)
        a = create_simulation(config)
        b = create_simulation(config)
        assert a.current.same_cells(b.current)


def test_create_simulation_from_pattern():
    simulation = create_simulation(LifeConfig.square(8, pattern="block"))
    assert simulation.current.live_cells == 4


def test_run_simulation_stops_on_steady_state(capsys):
    grid = Grid.from_rows(["....", ".##.", ".##.", "...."])
    config = LifeConfig.square(4, exit_on_steady=True, frame_delay_ms=0)
    renderer = ScriptedRenderer()

    last = run_simulation(config, Simulation.from_grid(grid), renderer)

    assert last == 1
    assert [index for index, _ in renderer.frames] == [0, 1]
    assert renderer.cleaned_up
    assert (
        "Repeating or steady state detected. Terminating at iteration 1."
        in capsys.readouterr().out
    )


def test_run_simulation_quit_and_pause():
    grid = Grid.from_rows(["...", "###", "..."])
    config = LifeConfig.square(3, frame_delay_ms=0)
    renderer = ScriptedRenderer(
        [
            RenderResult(),
            RenderResult(toggle_pause=True),
            RenderResult(),
            RenderResult(step_once=True),
            RenderResult(should_quit=True),
        ]
    )

    last = run_simulation(config, Simulation.from_grid(grid), renderer)

    assert renderer.frames == [(0, False), (1, False), (1, True), (1, True), (2, True)]
    assert last == 2
    assert renderer.cleaned_up


def test_main_runs_a_bounded_terminal_session(capsys):
    code = main(["-g", "5", "--seed", "3", "--max-generations", "3", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Iteration: 3" in out
    assert "Iteration: 4" not in out


def test_main_reports_oscillation(capsys):
    code = main(["-g", "9", "--pattern", "blinker", "-e", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Repeating state detected (period 2). Terminating at iteration 2." in out
