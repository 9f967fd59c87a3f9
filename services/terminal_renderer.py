"""
Terminal rendering for the Snake game.

Paints a BoardView into a curses window. Colours follow the cell kind:
walls cyan, food red, snake green, status text yellow.
"""

import curses
import logging

from domain.board_view import BoardView
from domain.constants import (
    BODY, FOOD, GLYPHS, HEAD_DOWN, HEAD_IDLE, HEAD_LEFT, HEAD_RIGHT, HEAD_UP, WALL,
)
from domain.errors import SnakeGameError

logger = logging.getLogger(__name__)

# Blank line between the board and the status block, plus the status lines
STATUS_ROWS = 3

SNAKE_PAIR = 1
FOOD_PAIR = 2
STATUS_PAIR = 3
WALL_PAIR = 4

CELL_PAIRS = {
    WALL: WALL_PAIR,
    FOOD: FOOD_PAIR,
    BODY: SNAKE_PAIR,
    HEAD_UP: SNAKE_PAIR,
    HEAD_DOWN: SNAKE_PAIR,
    HEAD_LEFT: SNAKE_PAIR,
    HEAD_RIGHT: SNAKE_PAIR,
    HEAD_IDLE: SNAKE_PAIR,
}


class TerminalTooSmallError(SnakeGameError):
    """The terminal cannot fit the board and its status lines."""


class TerminalRenderer:
    """Draws frames into a curses window."""

    def __init__(self, window, width: int, height: int):
        self.window = window
        self.colors = False
        rows, cols = window.getmaxyx()
        # curses cannot write the bottom-right cell, hence the extra column
        if rows < height + STATUS_ROWS or cols < width + 1:
            raise TerminalTooSmallError(
                f"Terminal too small! Need at least {width + 1}x{height + STATUS_ROWS}, got {cols}x{rows}"
            )

    def setup(self):
        """Hide the cursor, make getch() non-blocking and register colours."""
        curses.curs_set(0)
        self.window.nodelay(True)
        if curses.has_colors():
            curses.start_color()
            curses.init_pair(SNAKE_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(FOOD_PAIR, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(STATUS_PAIR, curses.COLOR_YELLOW, curses.COLOR_BLACK)
            curses.init_pair(WALL_PAIR, curses.COLOR_CYAN, curses.COLOR_BLACK)
            self.colors = True
        logger.debug("Terminal ready (colors=%s)", self.colors)

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self.colors else curses.A_NORMAL

    def paint(self, view: BoardView):
        self.window.erase()

        for y, row in enumerate(view.grid):
            for x, cell in enumerate(row):
                pair = CELL_PAIRS.get(cell)
                attr = self._attr(pair) if pair else curses.A_NORMAL
                self.window.addstr(y, x, GLYPHS[cell], attr)

        status_attr = self._attr(STATUS_PAIR) | curses.A_BOLD
        for offset, line in enumerate(view.status_lines(), start=1):
            self.window.addstr(view.height + offset, 0, line, status_attr)

        self.window.refresh()
