"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from typing import Optional

import pygame

from bug_crossing.gameplay.grid import Direction
from bug_crossing.gameplay.session import Session


logger = logging.getLogger(__name__)

# Arrow keys only
DIRECTION_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
}


class InputHandler:
    """
    Holds the latest directional key until the next frame dispatches it.

    Only one command is pending at a time: a newer key press replaces an
    older one that has not been dispatched yet. Once closed, key presses
    are dropped.
    """

    def __init__(self):
        self.pending: Optional[Direction] = None
        self.closed: bool = False

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if self.closed:
            return False

        direction = DIRECTION_KEYS.get(key)
        if direction is not None:
            self.pending = direction
        return False

    def dispatch(self, session: Session) -> Optional[Direction]:
        """Send the pending command to the session, if any."""
        direction = self.pending
        self.pending = None
        if direction is None or self.closed:
            return None
        session.handle_input(direction)
        return direction

    def close(self) -> None:
        """Stop accepting moves (called by the session at game over)."""
        if not self.closed:
            logger.info("Input closed")
        self.closed = True
        self.pending = None
