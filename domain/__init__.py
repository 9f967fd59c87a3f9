"""
Domain entities for the terminal Snake game engine.

This module contains the game model and its tick algorithm, independent of
terminal concerns (curses, key codes, timing).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT, RESTART, WALL, FOOD
from .errors import SnakeGameError, ConfigurationError, InvariantViolation
from .entity import Entity
from .snake import Snake
from .board_view import BoardView
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT', 'RESTART', 'WALL', 'FOOD',
    'SnakeGameError', 'ConfigurationError', 'InvariantViolation',
    'Entity',
    'Snake',
    'BoardView',
    'GameState',
]
