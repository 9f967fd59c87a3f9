"""
Player implementations for the terminal Snake game.

This module contains the input sources that feed one event per tick into
the game loop.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_BINDINGS, translate_key
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_BINDINGS',
    'translate_key',
    'RandomPlayer',
]
