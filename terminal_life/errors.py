"""Exceptions raised by the simulation core."""


class LifeError(Exception):
    """Base class for simulation errors."""


class InvalidDimension(LifeError, ValueError):
    """Grid width or height is not a positive integer."""

    def __init__(self, width, height):
        super().__init__(
            f"Grid dimensions must be positive integers, got {width}x{height}"
        )
        self.width = width
        self.height = height


class OutOfBounds(LifeError, IndexError):
    """Cell index outside the grid."""

    def __init__(self, row: int, col: int, width: int, height: int):
        super().__init__(
            f"Cell ({row}, {col}) is outside the {width}x{height} grid"
        )
        self.row = row
        self.col = col
