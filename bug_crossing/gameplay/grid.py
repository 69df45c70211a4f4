"""
Lane grid and coordinate conversion.
NO UI DEPENDENCIES.

Coordinate system:
- (0, 0) is the top-left corner of the playfield
- x increases to the right, one column is CELL_WIDTH pixels
- y increases downward; entity y is the row's bottom edge minus half a cell,
  which centers sprites vertically in their row
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .constants import (
    CELL_WIDTH, CELL_HEIGHT, GRID_COLUMNS, GRID_ROWS, OBSTACLE_OFFSCREEN_CELLS
)


class Direction(Enum):
    """Directional commands the player accepts."""
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"

    @classmethod
    def parse(cls, value: Union['Direction', str, None]) -> Optional['Direction']:
        """Return the matching direction, or None for anything unrecognized."""
        if isinstance(value, Direction):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    def delta(self) -> Tuple[int, int]:
        """Return (dcolumn, drow) for this direction."""
        deltas = {
            Direction.LEFT: (-1, 0),
            Direction.UP: (0, -1),
            Direction.RIGHT: (1, 0),
            Direction.DOWN: (0, 1),
        }
        return deltas[self]


@dataclass(frozen=True)
class GridConstants:
    """
    Immutable playfield dimensions.

    Row 0 is the goal row and cannot be stood on; the player walks
    rows min_row..max_row.
    """
    cell_width: int = CELL_WIDTH
    cell_height: int = CELL_HEIGHT
    columns: int = GRID_COLUMNS
    rows: int = GRID_ROWS

    @property
    def half_height(self) -> float:
        return self.cell_height / 2

    @property
    def min_column(self) -> int:
        return 0

    @property
    def max_column(self) -> int:
        return self.columns - 1

    @property
    def min_row(self) -> int:
        return 1

    @property
    def max_row(self) -> int:
        return self.rows - 1

    @property
    def visible_width(self) -> int:
        return self.columns * self.cell_width

    @property
    def obstacle_start_x(self) -> int:
        """Where obstacles spawn and re-enter, off-screen to the left."""
        return -OBSTACLE_OFFSCREEN_CELLS * self.cell_width

    @property
    def obstacle_right_boundary(self) -> int:
        """Obstacles past this x wrap back to obstacle_start_x."""
        return self.visible_width + OBSTACLE_OFFSCREEN_CELLS * self.cell_width

    def column_x(self, column: int) -> int:
        """Pixel x of a column."""
        return column * self.cell_width

    def row_y(self, row: int) -> float:
        """Pixel y of a row, vertically centered."""
        return row * self.cell_height - self.half_height

    def clamp_column(self, column: int) -> int:
        return max(self.min_column, min(self.max_column, column))

    def clamp_row(self, row: int) -> int:
        return max(self.min_row, min(self.max_row, row))

    def __repr__(self) -> str:
        return f"GridConstants({self.columns}x{self.rows} @ {self.cell_width}x{self.cell_height})"


DEFAULT_GRID = GridConstants()
