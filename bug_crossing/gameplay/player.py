"""
The player character.
NO UI DEPENDENCIES.
"""
import logging
from typing import Optional, Protocol, Tuple, Union

from .constants import PLAYER_LIVES, PLAYER_SPRITE
from .grid import Direction, GridConstants, DEFAULT_GRID

logger = logging.getLogger(__name__)


class PlayerListener(Protocol):
    """What the player signals outward. The Session implements this."""

    def advance_level(self) -> None:
        ...

    def end_game(self) -> None:
        ...

    def on_life_lost(self, lives: int) -> None:
        ...


class Player:
    """
    Grid-snapped player driven by directional commands.

    Position is kept as (column, row); x and y are derived from the grid so
    they are always aligned to a cell.

    States:
    - Idle: collided is False
    - Collided: an obstacle flagged a hit; the next update() resets the
      position and takes a life in one step
    """

    def __init__(
        self,
        grid: GridConstants = DEFAULT_GRID,
        listener: Optional[PlayerListener] = None,
        lives: int = PLAYER_LIVES,
    ):
        self.grid = grid
        self.listener = listener

        self.start_column: int = grid.columns // 2
        self.start_row: int = grid.max_row

        self.column: int = self.start_column
        self.row: int = self.start_row

        self.collided: bool = False
        self.lives: int = lives

    # =========================================================================
    # POSITION
    # =========================================================================

    @property
    def x(self) -> int:
        return self.grid.column_x(self.column)

    @property
    def y(self) -> float:
        return self.grid.row_y(self.row)

    @property
    def start_x(self) -> int:
        return self.grid.column_x(self.start_column)

    @property
    def start_y(self) -> float:
        return self.grid.row_y(self.start_row)

    @property
    def at_start(self) -> bool:
        return self.column == self.start_column and self.row == self.start_row

    # =========================================================================
    # COLLISION / LIVES
    # =========================================================================

    def flag_collision(self) -> None:
        """Latch a hit. Several hits in one tick resolve as one."""
        self.collided = True

    def update(self) -> None:
        """Resolve a pending collision: respawn first, then lose a life."""
        if self.collided:
            self.reset()
            self.lose_life()

    def reset(self) -> None:
        """Back to the start cell with the collision latch cleared."""
        self.column = self.start_column
        self.row = self.start_row
        self.collided = False

    def lose_life(self) -> None:
        if self.lives <= 0:
            logger.debug("lose_life called with no lives left, ignoring")
            return

        self.lives -= 1
        logger.info(f"Life lost, {self.lives} remaining")

        if self.listener is not None:
            self.listener.on_life_lost(self.lives)
            if self.lives == 0:
                self.listener.end_game()

    @property
    def is_alive(self) -> bool:
        return self.lives > 0

    # =========================================================================
    # INPUT
    # =========================================================================

    def handle_input(self, command: Union[Direction, str, None]) -> None:
        """
        Move one cell in the given direction.

        Left/right/down stop at the edges. Up from the top row does not move
        the player: reaching the water completes the level.
        """
        direction = Direction.parse(command)
        if direction is None:
            logger.debug(f"Ignoring unrecognized input {command!r}")
            return

        if direction == Direction.UP and self.row == self.grid.min_row:
            if self.listener is not None:
                self.listener.advance_level()
            return

        dcol, drow = direction.delta()
        self.column = self.grid.clamp_column(self.column + dcol)
        self.row = self.grid.clamp_row(self.row + drow)

    # Renderable
    def get_sprite(self) -> str:
        return PLAYER_SPRITE

    def get_position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Player(col={self.column}, row={self.row}, lives={self.lives})"
