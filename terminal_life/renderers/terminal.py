"""ANSI terminal renderer."""

import sys
import time
from typing import Optional, TextIO

from terminal_life.config import (
    ALIVE_GLYPH,
    CLEAR_SCREEN,
    CURSOR_HOME,
    DEAD_GLYPH,
    LifeConfig,
)
from terminal_life.models.generation import Generation, TerminationState
from terminal_life.renderers.render_result import RenderResult


def format_frame(generation: Generation) -> str:
    """
    Text for one frame: a line per grid row, then the iteration counter.

    Live cells are drawn as ``# `` and dead ones as ``- ``.
    """
    lines = [
        "".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row)
        for row in generation.grid.cells.tolist()
    ]
    lines.append(f"Iteration: {generation.index}")
    return "\n".join(lines) + "\n"


class TerminalRenderer:
    """
    Draws generations in place on an ANSI terminal.

    The screen is cleared once, then every frame moves the cursor home and
    overwrites the previous one in a single write.
    """

    def __init__(self, config: LifeConfig, stream: Optional[TextIO] = None):
        self.config = config
        self.stream = stream if stream is not None else sys.stdout
        self._cleared = False

    def render(
        self,
        generation: Generation,
        state: Optional[TerminationState] = None,
        paused: bool = False,
    ) -> RenderResult:
        """
        Draw one frame and wait out the frame delay.

        The terminal has no key handling; stop with Ctrl-C.
        """
        if not self._cleared:
            self.stream.write(CLEAR_SCREEN)
            self._cleared = True

        self.stream.write(CURSOR_HOME + format_frame(generation))
        self.stream.flush()

        if self.config.frame_delay_ms > 0:
            time.sleep(self.config.frame_delay_seconds)
        return RenderResult()

    def cleanup(self) -> None:
        self.stream.flush()
