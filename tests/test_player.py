"""
Tests for the player: movement, collisions and lives.
"""
import pytest

from bug_crossing.gameplay.player import Player
from bug_crossing.gameplay.grid import Direction, DEFAULT_GRID
from bug_crossing.gameplay.constants import PLAYER_LIVES, PLAYER_SPRITE


class TestPlayerInitialState:
    """Tests for a freshly created player."""

    def test_starts_middle_bottom(self):
        """Player starts in the middle column on the bottom row."""
        player = Player()
        assert player.start_x == DEFAULT_GRID.cell_width * 2
        assert player.start_y == DEFAULT_GRID.cell_height * 5 - DEFAULT_GRID.half_height
        assert (player.x, player.y) == (player.start_x, player.start_y)
        assert player.at_start

    def test_initial_lives_and_flag(self):
        player = Player()
        assert player.lives == PLAYER_LIVES == 3
        assert not player.collided
        assert player.is_alive


class TestPlayerMovement:
    """Tests for handle_input()."""

    def test_move_each_direction(self):
        """Each direction moves one cell."""
        player = Player()
        player.handle_input(Direction.UP)
        assert player.y == player.start_y - DEFAULT_GRID.cell_height
        player.handle_input(Direction.LEFT)
        assert player.x == player.start_x - DEFAULT_GRID.cell_width
        player.handle_input(Direction.RIGHT)
        player.handle_input(Direction.RIGHT)
        assert player.x == player.start_x + DEFAULT_GRID.cell_width
        player.handle_input(Direction.DOWN)
        assert player.y == player.start_y

    def test_string_commands(self):
        """String commands work like enum members."""
        player = Player()
        player.handle_input("up")
        assert player.row == player.start_row - 1

    def test_left_clamps(self):
        """Repeated left never goes past column 0."""
        player = Player()
        for _ in range(10):
            player.handle_input(Direction.LEFT)
        assert player.x == 0

    def test_right_clamps(self):
        """Repeated right never goes past the last column."""
        player = Player()
        for _ in range(10):
            player.handle_input(Direction.RIGHT)
        assert player.x == DEFAULT_GRID.cell_width * 4

    def test_down_clamps_at_start_row(self):
        """Down from the bottom row does nothing."""
        player = Player()
        player.handle_input(Direction.DOWN)
        assert player.y == player.start_y

    @pytest.mark.parametrize("command", ["jump", None, 37, ""])
    def test_unrecognized_input_ignored(self, command, listener):
        """Unknown commands change nothing."""
        player = Player(listener=listener)
        player.handle_input(command)
        assert player.at_start
        assert listener.level_advances == 0

    def test_up_at_top_advances_level(self, listener):
        """Up from the top row signals a level-up and does not move."""
        player = Player(listener=listener)
        for _ in range(4):
            player.handle_input(Direction.UP)
        assert player.row == DEFAULT_GRID.min_row
        top_y = player.y

        player.handle_input(Direction.UP)

        assert listener.level_advances == 1
        assert player.y == top_y

    def test_position_stays_on_grid(self):
        """After any walk x and y are grid-aligned."""
        player = Player()
        for command in ["up", "left", "up", "up", "right", "right", "right", "down", "left"]:
            player.handle_input(command)
            assert player.x % DEFAULT_GRID.cell_width == 0
            assert (player.y + DEFAULT_GRID.half_height) % DEFAULT_GRID.cell_height == 0


class TestPlayerCollision:
    """Tests for the collision latch and update()."""

    def test_flag_is_idempotent(self, listener):
        """Several flags in one tick cost one life."""
        player = Player(listener=listener)
        player.flag_collision()
        player.flag_collision()
        player.flag_collision()
        player.update()
        assert player.lives == 2
        assert listener.lives_lost == [2]

    def test_update_resets_then_loses_life(self, listener):
        """A collision respawns the player and takes a life."""
        player = Player(listener=listener)
        player.handle_input(Direction.UP)
        player.handle_input(Direction.LEFT)
        player.flag_collision()

        player.update()

        assert player.at_start
        assert not player.collided
        assert player.lives == 2

    def test_update_without_collision(self, listener):
        """Idle update changes nothing."""
        player = Player(listener=listener)
        player.handle_input(Direction.UP)
        player.update()
        assert player.row == player.start_row - 1
        assert player.lives == 3
        assert listener.lives_lost == []

    def test_last_life_ends_game(self, listener):
        """Reaching zero lives signals end of game once."""
        player = Player(listener=listener)
        for _ in range(3):
            player.flag_collision()
            player.update()
        assert player.lives == 0
        assert not player.is_alive
        assert listener.lives_lost == [2, 1, 0]
        assert listener.game_ends == 1

    def test_lose_life_guarded_at_zero(self, listener):
        """lose_life never goes below zero."""
        player = Player(listener=listener, lives=1)
        player.lose_life()
        player.lose_life()
        assert player.lives == 0
        assert listener.game_ends == 1
        assert listener.lives_lost == [0]

    def test_without_listener(self):
        """A player without a listener still tracks lives."""
        player = Player()
        player.lose_life()
        assert player.lives == 2


class TestPlayerRenderable:
    def test_sprite_and_position(self):
        player = Player()
        assert player.get_sprite() == PLAYER_SPRITE
        assert player.get_position() == (player.start_x, player.start_y)
