#!/usr/bin/env python3
"""
Bug Crossing - Main Entry Point

Cross the three stone lanes to reach the water without touching a bug.
Every crossing is a new level: the bugs get faster and you score 100 points.
You have three lives.

Usage:
    python -m bug_crossing

Controls:
    Arrow keys: Move
    Enter / click: Close the game-over box
    Escape: Quit
"""
import logging

import pygame

from bug_crossing.config import Settings, get_settings
from bug_crossing.gameplay.session import Session
from bug_crossing.ui.input_handler import InputHandler
from bug_crossing.ui.renderer import HudDisplay, Renderer, screen_size

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Tick driver: one frame per clock tick.

    Each frame dispatches the latest key press, then advances the session by
    the elapsed time, then draws.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.input_handler = InputHandler()
        self.hud = HudDisplay(lives=settings.lives)
        self.session = Session.from_settings(
            settings, display=self.hud, input_channel=self.input_handler
        )
        self.renderer = Renderer(self.session, self.hud, settings.assets_dir)
        self.running = False

    def clamp_dt(self, elapsed_ms: int) -> float:
        """Elapsed milliseconds to seconds, clamped to avoid huge steps after pauses."""
        return min(max(elapsed_ms, 0) / 1000.0, self.settings.max_dt)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYUP:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self.hud.hide_modal()
            elif self.input_handler.handle_key(event.key):
                self.running = False
        elif event.type == pygame.MOUSEBUTTONUP:
            self.hud.hide_modal()

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode(screen_size(self.session.grid))
            pygame.display.set_caption(self.settings.window_title)
            self.renderer.init_fonts()
            clock = pygame.time.Clock()

            self.running = True
            logger.info("Starting game loop...")
            while self.running:
                dt = self.clamp_dt(clock.tick(self.settings.fps))

                for event in pygame.event.get():
                    self.handle_event(event)

                self.input_handler.dispatch(self.session)
                self.session.update(dt)

                self.renderer.render(screen)
                pygame.display.flip()
        finally:
            pygame.quit()
            logger.info("Game loop stopped.")


def main():
    """Main entry point."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger.info("Bug Crossing - Starting...")
    GameLoop(settings).run()


if __name__ == "__main__":
    main()
