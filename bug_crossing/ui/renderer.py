"""
Renderer - Reads session state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

from bug_crossing.gameplay.grid import GridConstants
from bug_crossing.gameplay.constants import OBSTACLE_SPRITE, PLAYER_SPRITE
from bug_crossing.gameplay.session import Session

logger = logging.getLogger(__name__)


# Visual constants
TILE_TOP = 50                 # tiles start below the sprite headroom
SPRITE_HEIGHT = 171           # tile and character images are 101x171
BOTTOM_MARGIN = 20
ENTITY_BLOCK_OFFSET_Y = 100   # fallback block position inside a sprite frame
ENTITY_BLOCK_HEIGHT = 60
HUD_HEIGHT = 40

# Colors
COLOR_BACKGROUND = (255, 255, 255)
COLOR_WATER = (70, 130, 220)
COLOR_STONE = (150, 150, 150)
COLOR_GRASS = (90, 180, 90)
COLOR_GRID_LINE = (60, 60, 60)
COLOR_OBSTACLE = (220, 60, 60)
COLOR_PLAYER = (240, 210, 80)
COLOR_HUD = (30, 30, 30)
COLOR_LIFE = (220, 60, 90)
COLOR_MODAL_BG = (20, 20, 30, 220)
COLOR_MODAL_TEXT = (240, 240, 240)

ROW_TILES = {
    0: ("images/water-block.png", COLOR_WATER),
    1: ("images/stone-block.png", COLOR_STONE),
    2: ("images/stone-block.png", COLOR_STONE),
    3: ("images/stone-block.png", COLOR_STONE),
}
GRASS_TILE = ("images/grass-block.png", COLOR_GRASS)

SPRITE_COLORS = {
    OBSTACLE_SPRITE: COLOR_OBSTACLE,
    PLAYER_SPRITE: COLOR_PLAYER,
}


def screen_size(grid: GridConstants) -> tuple:
    """Window (width, height) for a grid, including the HUD strip."""
    height = (grid.rows - 1) * grid.cell_height + SPRITE_HEIGHT + BOTTOM_MARGIN + HUD_HEIGHT
    return (grid.visible_width, height)


class HudDisplay:
    """
    Level, score and lives as shown to the player, plus the game-over modal.
    Receives the session's display notifications.
    """

    def __init__(self, lives: int):
        self.level: int = 1
        self.score: int = 0
        self.lives: int = lives
        self.modal_text: Optional[str] = None
        self.modal_visible: bool = False

    def on_level_up(self, level: int, score: int) -> None:
        self.level = level
        self.score = score

    def on_life_lost(self, lives_remaining: int) -> None:
        self.lives = lives_remaining

    def on_game_end(self, final_score: int) -> None:
        self.modal_text = f"Your score is {final_score}"
        self.modal_visible = True

    def hide_modal(self) -> None:
        """Dismiss the game-over modal. The session stays ended."""
        self.modal_visible = False


class Renderer:
    """
    Draws the lane grid, every renderable and the HUD.

    Sprites are loaded from assets_dir by their sprite id; any that are
    missing are drawn as colored blocks.
    """

    def __init__(self, session: Session, hud: HudDisplay, assets_dir: Path):
        self.session = session
        self.hud = hud
        self.assets_dir = assets_dir
        self._images: Dict[str, Optional[pygame.Surface]] = {}
        self._font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def init_fonts(self) -> None:
        """Must run after pygame.init()."""
        self._font = pygame.font.Font(None, 28)
        self._title_font = pygame.font.Font(None, 56)

    def get_image(self, sprite: str) -> Optional[pygame.Surface]:
        """Load (once) and return the image for a sprite id, or None."""
        if sprite not in self._images:
            path = self.assets_dir / sprite
            image = None
            if path.exists():
                try:
                    image = pygame.image.load(str(path)).convert_alpha()
                except pygame.error as e:
                    logger.warning(f"Could not load sprite {path}: {e}")
            else:
                logger.debug(f"Sprite {path} not found, drawing blocks")
            self._images[sprite] = image
        return self._images[sprite]

    # =========================================================================
    # DRAWING
    # =========================================================================

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(COLOR_BACKGROUND)
        self._render_background(surface)
        self._render_entities(surface)
        self._render_hud(surface)
        if self.hud.modal_visible:
            self._render_modal(surface)

    def _render_background(self, surface: pygame.Surface) -> None:
        grid = self.session.grid
        for row in range(grid.rows):
            sprite, color = ROW_TILES.get(row, GRASS_TILE)
            image = self.get_image(sprite)
            for col in range(grid.columns):
                x = grid.column_x(col)
                y = row * grid.cell_height
                if image is not None:
                    surface.blit(image, (x, y))
                else:
                    rect = pygame.Rect(x, y + TILE_TOP, grid.cell_width, grid.cell_height)
                    pygame.draw.rect(surface, color, rect)
                    pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)

    def _render_entities(self, surface: pygame.Surface) -> None:
        grid = self.session.grid
        for item in self.session.renderables():
            sprite = item.get_sprite()
            x, y = item.get_position()
            image = self.get_image(sprite)
            if image is not None:
                surface.blit(image, (x, y))
                continue
            rect = pygame.Rect(
                int(x) + 8, int(y) + ENTITY_BLOCK_OFFSET_Y,
                grid.cell_width - 16, ENTITY_BLOCK_HEIGHT
            )
            pygame.draw.rect(surface, SPRITE_COLORS.get(sprite, COLOR_HUD), rect)

    def _render_hud(self, surface: pygame.Surface) -> None:
        if self._font is None:
            return
        top = surface.get_height() - HUD_HEIGHT + 8
        text = f"Level {self.hud.level}   Score {self.hud.score}"
        surface.blit(self._font.render(text, True, COLOR_HUD), (10, top))

        # One heart per remaining life, right aligned
        for i in range(self.hud.lives):
            cx = surface.get_width() - 20 - i * 28
            pygame.draw.circle(surface, COLOR_LIFE, (cx, top + 10), 10)

    def _render_modal(self, surface: pygame.Surface) -> None:
        if self._font is None or self._title_font is None:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_MODAL_BG)
        surface.blit(overlay, (0, 0))

        center_x = surface.get_width() // 2
        center_y = surface.get_height() // 2

        title = self._title_font.render("Game Over", True, COLOR_MODAL_TEXT)
        surface.blit(title, title.get_rect(center=(center_x, center_y - 30)))

        if self.hud.modal_text:
            score = self._font.render(self.hud.modal_text, True, COLOR_MODAL_TEXT)
            surface.blit(score, score.get_rect(center=(center_x, center_y + 20)))
