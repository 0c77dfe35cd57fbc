"""Pygame-based grid renderer for Game of Life visualization."""

from typing import Optional

import pygame

from terminal_life.config import (
    ALIVE_COLOR,
    BACKGROUND_COLOR,
    DEAD_COLOR,
    MAX_FPS,
    MIN_FPS,
    STATUS_BAR_HEIGHT,
    TEXT_COLOR,
    LifeConfig,
)
from terminal_life.models.generation import Generation, TerminationState
from terminal_life.renderers.render_result import RenderResult


class PygameGridRenderer:
    """
    Renders the Game of Life grid in a pygame window.

    Features:
    - One square per cell
    - Status bar with generation, live cells and termination state
    - Pause overlay
    """

    def __init__(self, config: LifeConfig):
        """
        Initialize the pygame renderer.

        Args:
            config: Run configuration.
        """
        self.config = config
        self.cell_size = config.cell_size

        pygame.init()
        pygame.display.set_caption("Game of Life")

        self.screen = pygame.display.set_mode(
            (config.window_width, config.window_height)
        )
        self.font = pygame.font.SysFont("monospace", 14)
        self.clock = pygame.time.Clock()

    def render(
        self,
        generation: Generation,
        state: Optional[TerminationState] = None,
        paused: bool = False,
    ) -> RenderResult:
        """
        Render the complete visualization frame.

        Args:
            generation: Generation to draw.
            state: Termination state to show in the status bar.
            paused: Whether the simulation is paused.

        Returns:
            RenderResult with user input flags.
        """
        result = self._poll_events()

        self.screen.fill(BACKGROUND_COLOR)
        self._draw_cells(generation)
        self._draw_status(generation, state, paused)

        if paused:
            self._draw_pause_overlay()

        pygame.display.flip()

        # Cap framerate
        self.clock.tick(self.config.fps)
        return result

    def _poll_events(self) -> RenderResult:
        result = RenderResult()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result.should_quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    result.should_quit = True
                elif event.key == pygame.K_SPACE:
                    result.toggle_pause = True
                elif event.key == pygame.K_n or event.key == pygame.K_RIGHT:
                    result.step_once = True
                elif event.key == pygame.K_UP or event.key == pygame.K_EQUALS:
                    result.speed_up = True
                elif event.key == pygame.K_DOWN or event.key == pygame.K_MINUS:
                    result.speed_down = True

        if result.speed_up:
            self.config.fps = min(MAX_FPS, self.config.fps + 2)
        elif result.speed_down:
            self.config.fps = max(MIN_FPS, self.config.fps - 2)
        return result

    def _draw_cells(self, generation: Generation) -> None:
        """Draw all cells, with a 1px gap for a grid effect."""
        cells = generation.grid.cells
        for row in range(generation.height):
            for col in range(generation.width):
                color = ALIVE_COLOR if cells[row, col] else DEAD_COLOR
                pygame.draw.rect(
                    self.screen,
                    color,
                    (
                        col * self.cell_size,
                        row * self.cell_size,
                        self.cell_size - 1,
                        self.cell_size - 1,
                    ),
                )

    def _draw_status(
        self,
        generation: Generation,
        state: Optional[TerminationState],
        paused: bool,
    ) -> None:
        label = f"Gen {generation.index}  Live {generation.live_cells}"
        if state is not None and not state.is_running:
            label += f"  {state.describe()}"
        if paused:
            label += "  [paused]"
        text = self.font.render(label, True, TEXT_COLOR)
        y = self.config.window_height - STATUS_BAR_HEIGHT + 4
        self.screen.blit(text, (4, y))

    def _draw_pause_overlay(self) -> None:
        """Draw a semi-transparent pause indicator."""
        width = self.config.window_width
        height = self.config.window_height - STATUS_BAR_HEIGHT
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 100))
        self.screen.blit(overlay, (0, 0))

        hint = self.font.render(
            "PAUSED - SPACE to resume, N to step", True, (255, 255, 255)
        )
        self.screen.blit(hint, hint.get_rect(center=(width // 2, height // 2)))

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
