"""Renderers package for the Game of Life runner.

The pygame window renderer lives in ``terminal_life.renderers.pygame_grid``
and is imported on demand, so terminal runs never load pygame.
"""

from terminal_life.renderers.render_result import RenderResult
from terminal_life.renderers.terminal import TerminalRenderer

__all__ = ["RenderResult", "TerminalRenderer"]
