import io

from terminal_life.config import CLEAR_SCREEN, CURSOR_HOME, LifeConfig
from terminal_life.models.generation import Generation
from terminal_life.models.grid import Grid
from terminal_life.renderers.terminal import TerminalRenderer, format_frame


def test_format_frame_layout():
    generation = Generation.capture(1, Grid.from_rows(["...", "###", "..."]))
    assert format_frame(generation) == (
        "- - - \n"
        "# # # \n"
        "- - - \n"
        "Iteration: 1\n"
    )


def test_renderer_clears_once_then_homes_cursor():
    stream = io.StringIO()
    renderer = TerminalRenderer(LifeConfig.square(2, frame_delay_ms=0), stream)
    generation = Generation.capture(0, Grid.from_rows(["#.", ".#"]))

    result = renderer.render(generation)
    renderer.render(generation)
    renderer.cleanup()

    output = stream.getvalue()
    assert output.startswith(CLEAR_SCREEN + CURSOR_HOME)
    assert output.count(CLEAR_SCREEN) == 1
    assert output.count("Iteration: 0") == 2
    assert not result.should_quit
