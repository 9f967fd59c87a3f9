"""
Tests for the input sources in players/.
"""

import curses
import os
import random
import sys
from unittest.mock import Mock

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, Snake, UP, DOWN, LEFT, RIGHT, QUIT, RESTART, VALID_MOVES
from domain.constants import BODY
from players import KeyboardPlayer, Player, RandomPlayer, translate_key


class TestKeyBindings:
    """Tests for translate_key()."""

    @pytest.mark.parametrize("key,event", [
        (27, QUIT),
        (ord('r'), RESTART), (ord('R'), RESTART),
        (ord('w'), UP), (ord('W'), UP),
        (ord('a'), LEFT), (ord('A'), LEFT),
        (ord('s'), DOWN), (ord('S'), DOWN),
        (ord('d'), RIGHT), (ord('D'), RIGHT),
        (curses.KEY_UP, UP),
        (curses.KEY_DOWN, DOWN),
        (curses.KEY_LEFT, LEFT),
        (curses.KEY_RIGHT, RIGHT),
    ])
    def test_bound_keys(self, key, event):
        assert translate_key(key) == event

    @pytest.mark.parametrize("key", [-1, ord('q'), ord('x'), ord(' '), 0])
    def test_unbound_keys_map_to_none(self, key):
        """No key pressed (-1) and unknown keys are the None event."""
        assert translate_key(key) is None


class TestKeyboardPlayer:

    def test_reads_window_without_blocking(self):
        window = Mock()
        window.getch.return_value = ord('d')
        player = KeyboardPlayer(window)

        assert player.get_input(view=None) == RIGHT
        window.getch.assert_called_once_with()

    def test_no_key_is_none(self):
        window = Mock()
        window.getch.return_value = -1
        assert KeyboardPlayer(window).get_input(view=None) is None


class TestBasePlayer:

    def test_get_input_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Player().get_input(view=None)


class TestRandomPlayer:
    """Tests for the demo-mode autopilot."""

    def make_view(self, positions, direction=None, alive=True):
        game = GameState(rng=random.Random(0))
        food = game.food
        food.x, food.y = 30, 15
        game.snake = Snake(positions)
        game.direction = direction
        game.alive = alive
        return game.render_view()

    def test_returns_valid_move(self):
        player = RandomPlayer(rng=random.Random(1))
        view = self.make_view([(20, 10)])
        assert player.get_input(view) in VALID_MOVES

    def test_avoids_walls_when_possible(self):
        """In the top-left interior corner only DOWN and RIGHT are safe."""
        player = RandomPlayer(rng=random.Random(2))
        view = self.make_view([(1, 1)])

        for _ in range(20):
            move = player.get_input(view)
            assert move in {DOWN, RIGHT}, f"Expected DOWN or RIGHT, got {move}"

    def test_never_requests_reversal(self):
        player = RandomPlayer(rng=random.Random(3))
        view = self.make_view([(19, 10), (20, 10)], direction=RIGHT)

        for _ in range(20):
            assert player.get_input(view) != LEFT

    def test_avoids_own_body(self):
        """Head at (11, 11) moving RIGHT with body above: UP is unsafe."""
        player = RandomPlayer(rng=random.Random(4))
        view = self.make_view(
            [(12, 10), (11, 10), (10, 10), (10, 11), (11, 11)], direction=RIGHT
        )

        for _ in range(20):
            assert player.get_input(view) in {DOWN, RIGHT}

    def test_trapped_still_returns_a_move(self):
        player = RandomPlayer(rng=random.Random(5))
        # Moving UP into the top-left corner: UP and LEFT are walls, DOWN reverses
        view = self.make_view([(1, 2), (1, 1)], direction=UP)
        view.grid[1][2] = BODY

        assert player.get_input(view) in VALID_MOVES

    def test_restarts_after_death(self):
        player = RandomPlayer()
        view = self.make_view([(20, 10)], alive=False)
        assert player.get_input(view) == RESTART
