"""Coordinate helpers for the 9x9 Sudoku grid."""

GRID_SIZE = 9
NUM_CELLS = GRID_SIZE * GRID_SIZE


def _check_coordinate(value: int, name: str) -> None:
    if not 0 <= value < GRID_SIZE:
        raise ValueError(f"{name} must be between 0 and 8, got {value!r}")


def get_block_offset(coordinate: int) -> int:
    """Return the first coordinate of the 3x3 block containing ``coordinate``."""
    _check_coordinate(coordinate, "coordinate")
    return coordinate - coordinate % 3


def get_pos(x: int, y: int) -> int:
    """Return the linear position (0..80) of the cell at ``x``, ``y``."""
    _check_coordinate(x, "x")
    _check_coordinate(y, "y")
    return y * GRID_SIZE + x


def get_x_and_y_from_pos(pos: int) -> tuple[int, int]:
    """Return the ``(x, y)`` coordinates of the given linear position."""
    if not 0 <= pos < NUM_CELLS:
        raise ValueError(f"pos must be between 0 and 80, got {pos!r}")
    y, x = divmod(pos, GRID_SIZE)
    return x, y