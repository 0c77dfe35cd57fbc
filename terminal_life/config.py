"""Configuration and constants for the Game of Life runner."""

from dataclasses import dataclass
from typing import Optional, Tuple

from terminal_life.errors import InvalidDimension

# ==============================================================================
# Simulation Constants
# ==============================================================================

DEFAULT_GRID_SIZE: int = 30
MIN_GRID_SIZE: int = 1
MAX_GRID_SIZE: int = 100

# Longest oscillation period the history window can detect
DEFAULT_HISTORY_CAPACITY: int = 10

DEFAULT_DENSITY: float = 0.3
SEEDING_STYLES: Tuple[str, ...] = ("scatter", "density")

# ==============================================================================
# Terminal Output
# ==============================================================================

DEFAULT_FRAME_DELAY_MS: int = 50
ALIVE_GLYPH: str = "# "
DEAD_GLYPH: str = "- "

CLEAR_SCREEN: str = "\x1b[2J\x1b[H"
CURSOR_HOME: str = "\x1b[H"

# ==============================================================================
# Window Output (pygame)
# ==============================================================================

ALIVE_COLOR: Tuple[int, int, int] = (100, 160, 255)
DEAD_COLOR: Tuple[int, int, int] = (20, 40, 80)
BACKGROUND_COLOR: Tuple[int, int, int] = (20, 20, 20)
TEXT_COLOR: Tuple[int, int, int] = (220, 220, 220)

STATUS_BAR_HEIGHT: int = 24
DEFAULT_CELL_SIZE: int = 10
DEFAULT_FPS: int = 20
MIN_FPS: int = 1
MAX_FPS: int = 60


# ==============================================================================
# Configuration Dataclass
# ==============================================================================


@dataclass
class LifeConfig:
    """Configuration for a simulation run."""

    # Grid dimensions
    grid_width: int = DEFAULT_GRID_SIZE
    grid_height: int = DEFAULT_GRID_SIZE

    # Termination
    exit_on_steady: bool = False
    max_generations: Optional[int] = None
    history_capacity: int = DEFAULT_HISTORY_CAPACITY

    # Seeding
    seeding: str = "scatter"
    density: float = DEFAULT_DENSITY
    seed: Optional[int] = None
    pattern: Optional[str] = None

    # Display settings
    frame_delay_ms: int = DEFAULT_FRAME_DELAY_MS
    window: bool = False
    cell_size: int = DEFAULT_CELL_SIZE
    fps: int = DEFAULT_FPS

    @classmethod
    def square(cls, grid_size: int, **kwargs) -> "LifeConfig":
        """Config for a square grid of side ``grid_size``."""
        return cls(grid_width=grid_size, grid_height=grid_size, **kwargs)

    @property
    def frame_delay_seconds(self) -> float:
        """Pause between terminal frames in seconds."""
        return self.frame_delay_ms / 1000

    @property
    def window_width(self) -> int:
        """Window width in pixels."""
        return self.grid_width * self.cell_size

    @property
    def window_height(self) -> int:
        """Window height in pixels, including the status bar."""
        return self.grid_height * self.cell_size + STATUS_BAR_HEIGHT

    def validate(self) -> None:
        """
        Check the configuration for values the simulation cannot run with.

        Raises:
            InvalidDimension: If the grid size is not positive.
            ValueError: For any other out-of-range setting.
        """
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise InvalidDimension(self.grid_width, self.grid_height)
        if self.history_capacity < 1:
            raise ValueError(
                f"History capacity must be at least 1, got {self.history_capacity}"
            )
        if self.max_generations is not None and self.max_generations < 0:
            raise ValueError(
                f"Max generations cannot be negative, got {self.max_generations}"
            )
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"Density must be within 0.0-1.0, got {self.density}")
        if self.seeding not in SEEDING_STYLES:
            raise ValueError(f"Unknown seeding style: {self.seeding}")
        if self.frame_delay_ms < 0:
            raise ValueError(f"Frame delay cannot be negative, got {self.frame_delay_ms}")
        if self.cell_size < 1 or not MIN_FPS <= self.fps <= MAX_FPS:
            raise ValueError("Cell size must be positive and fps within 1-60")
