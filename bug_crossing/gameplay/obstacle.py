"""
Obstacles that crawl along the stone lanes.
NO UI DEPENDENCIES.
"""
import logging
import math
import random
from typing import Optional, Tuple, TYPE_CHECKING

from .constants import (
    OBSTACLE_MIN_SPEED, OBSTACLE_MAX_SPEED, OBSTACLE_SPEED_INCREMENT,
    COLLISION_DISTANCE, OBSTACLE_SPRITE
)
from .grid import GridConstants, DEFAULT_GRID

if TYPE_CHECKING:
    from .player import Player

logger = logging.getLogger(__name__)


def roll_speed(rng: random.Random) -> int:
    """Draw an integer speed uniformly from [OBSTACLE_MIN_SPEED, OBSTACLE_MAX_SPEED)."""
    span = OBSTACLE_MAX_SPEED - OBSTACLE_MIN_SPEED
    return math.floor(rng.random() * span) + OBSTACLE_MIN_SPEED


class Obstacle:
    """
    A bug moving left to right along a single lane.

    The lane never changes. When the bug leaves the right side of the
    playfield it re-enters from start_x with the same speed; speed only
    changes through increase_speed() on level-up.
    """

    def __init__(
        self,
        lane_row: int,
        grid: GridConstants = DEFAULT_GRID,
        rng: Optional[random.Random] = None,
    ):
        self.grid = grid
        self.lane_row: int = lane_row
        self.lane_y: float = grid.row_y(lane_row)
        self.start_x: int = grid.obstacle_start_x
        self.x: float = self.start_x
        self.speed: int = roll_speed(rng if rng is not None else random.Random())

    def advance(self, dt: float) -> None:
        """Move by speed * dt, wrapping back to start_x past the right boundary."""
        if dt <= 0:
            return

        self.x += self.speed * dt

        if self.x > self.grid.obstacle_right_boundary:
            self.x = self.start_x

    def check_collision(self, player: 'Player') -> bool:
        """
        Flag the player if this bug overlaps it.
        Both are snapped to rows, so the lane must match exactly.
        """
        if abs(self.x - player.x) < COLLISION_DISTANCE and self.lane_y == player.y:
            logger.debug(f"Collision in lane {self.lane_row} at x={self.x:.1f}")
            player.flag_collision()
            return True
        return False

    def increase_speed(self) -> None:
        self.speed += OBSTACLE_SPEED_INCREMENT

    # Renderable
    def get_sprite(self) -> str:
        return OBSTACLE_SPRITE

    def get_position(self) -> Tuple[float, float]:
        return (self.x, self.lane_y)

    def __repr__(self) -> str:
        return f"Obstacle(lane={self.lane_row}, x={self.x:.1f}, speed={self.speed})"
