"""
Session controller - owns the player and the obstacles, runs the tick.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
import random
from typing import List, Optional, Protocol, Tuple, Union, TYPE_CHECKING

from .constants import OBSTACLE_COUNT, OBSTACLE_LANES, PLAYER_LIVES, LEVEL_SCORE
from .grid import Direction, GridConstants, DEFAULT_GRID
from .obstacle import Obstacle
from .player import Player

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class SessionDisplay(Protocol):
    """Score/level/lives/modal display. Fire-and-forget notifications."""

    def on_level_up(self, level: int, score: int) -> None:
        ...

    def on_life_lost(self, lives_remaining: int) -> None:
        ...

    def on_game_end(self, final_score: int) -> None:
        ...


class InputChannel(Protocol):
    """Source of directional commands. Closed once the game ends."""

    def close(self) -> None:
        ...


class Renderable(Protocol):
    def get_sprite(self) -> str:
        ...

    def get_position(self) -> Tuple[float, float]:
        ...


class NullDisplay:
    """Display that ignores every notification."""

    def on_level_up(self, level: int, score: int) -> None:
        pass

    def on_life_lost(self, lives_remaining: int) -> None:
        pass

    def on_game_end(self, final_score: int) -> None:
        pass


def lane_for_index(index: int, lanes: int = OBSTACLE_LANES) -> int:
    """Row of the index-th obstacle; lanes are filled round-robin from row 1."""
    return (index % lanes) + 1


class Session:
    """
    One live game: level, score and the ended flag.

    Tick order is fixed: every obstacle advances and checks the player, in
    creation order, then the player resolves any collision. A hit detected
    in a tick is therefore resolved in the same tick.

    Usage:
        session = Session(rng=random.Random(1), display=hud)
        session.handle_input(Direction.UP)
        while not session.ended:
            session.update(dt)
    """

    def __init__(
        self,
        grid: GridConstants = DEFAULT_GRID,
        rng: Optional[random.Random] = None,
        display: Optional[SessionDisplay] = None,
        input_channel: Optional[InputChannel] = None,
        obstacle_count: int = OBSTACLE_COUNT,
        lives: int = PLAYER_LIVES,
    ):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.display: SessionDisplay = display if display is not None else NullDisplay()
        self.input_channel = input_channel

        self.level: int = 1
        self.score: int = 0
        self.ended: bool = False

        self.player = Player(grid, listener=self, lives=lives)
        self.obstacles: List[Obstacle] = [
            Obstacle(lane_for_index(i), grid, self.rng)
            for i in range(obstacle_count)
        ]

        logger.debug(f"Session created with {len(self.obstacles)} obstacles on {grid!r}")

    @classmethod
    def from_settings(
        cls,
        settings: 'Settings',
        display: Optional[SessionDisplay] = None,
        input_channel: Optional[InputChannel] = None,
    ) -> 'Session':
        """Build a session from application settings."""
        return cls(
            rng=random.Random(settings.seed),
            display=display,
            input_channel=input_channel,
            obstacle_count=settings.obstacle_count,
            lives=settings.lives,
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def handle_input(self, command: Union[Direction, str, None]) -> None:
        """Forward a directional command to the player."""
        if self.ended:
            logger.debug(f"Ignoring input {command!r} after game end")
            return
        self.player.handle_input(command)

    def advance_level(self) -> None:
        """
        The player reached the water: respawn without losing a life,
        speed up every obstacle and award the level score.
        """
        if self.ended:
            return

        self.player.reset()

        for obstacle in self.obstacles:
            obstacle.increase_speed()

        self.level += 1
        self.score += LEVEL_SCORE

        logger.info(f"Level up: level={self.level} score={self.score}")
        self.display.on_level_up(self.level, self.score)

    def end_game(self) -> None:
        """Terminal. Shows the final score and stops the input channel."""
        if self.ended:
            return

        self.ended = True
        logger.info(f"Game over: final score {self.score}")

        self.display.on_game_end(self.score)
        if self.input_channel is not None:
            self.input_channel.close()

    def on_life_lost(self, lives: int) -> None:
        if self.ended:
            return
        self.display.on_life_lost(lives)

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance the session by dt seconds."""
        if self.ended:
            return

        for obstacle in self.obstacles:
            obstacle.advance(dt)
            obstacle.check_collision(self.player)

        self.player.update()

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def renderables(self) -> List[Renderable]:
        """Everything to draw, back to front."""
        items: List[Renderable] = list(self.obstacles)
        items.append(self.player)
        return items

    @property
    def lives(self) -> int:
        return self.player.lives

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: float = 0.1) -> None:
        """Run update() repeatedly for a number of seconds or until the game ends."""
        elapsed = 0.0
        while elapsed < seconds and not self.ended:
            self.update(dt)
            elapsed += dt
