"""Result type shared by the renderers."""

from dataclasses import dataclass


@dataclass
class RenderResult:
    """Result of a render call with user input information."""

    should_quit: bool = False
    toggle_pause: bool = False
    step_once: bool = False
    speed_up: bool = False
    speed_down: bool = False
