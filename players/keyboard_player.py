"""
Keyboard player - translates curses key codes into input events.
"""

import curses
from typing import Optional

from domain.board_view import BoardView
from domain.constants import UP, DOWN, LEFT, RIGHT, QUIT, RESTART
from .base import Player

ESCAPE = 27

KEY_BINDINGS = {
    ESCAPE: QUIT,
    ord('r'): RESTART,
    ord('R'): RESTART,
    ord('w'): UP,
    ord('W'): UP,
    ord('a'): LEFT,
    ord('A'): LEFT,
    ord('s'): DOWN,
    ord('S'): DOWN,
    ord('d'): RIGHT,
    ord('D'): RIGHT,
    curses.KEY_UP: UP,
    curses.KEY_LEFT: LEFT,
    curses.KEY_DOWN: DOWN,
    curses.KEY_RIGHT: RIGHT,
}


def translate_key(key: int) -> Optional[str]:
    """Map a raw key code to an input event; unknown keys and -1 map to None."""
    return KEY_BINDINGS.get(key)


class KeyboardPlayer(Player):
    """
    Reads the pressed key from a curses window without blocking.

    The window must be in nodelay mode so getch() returns -1 when no key
    is waiting.
    """

    def __init__(self, window):
        self.window = window

    def get_input(self, view: BoardView) -> Optional[str]:
        return translate_key(self.window.getch())
