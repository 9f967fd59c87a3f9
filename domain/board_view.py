"""
BoardView - a read-only snapshot of the board for display.
"""

from typing import List, Optional, Tuple

from .constants import DEATH_PROMPT, GLYPHS


class BoardView:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        grid: height rows of width symbolic cell values (see constants)
        score: snake length minus one
        alive: whether the snake is still alive
        direction: current movement direction, or None before the first move
        head: (x, y) of the snake's head
    """

    def __init__(
        self,
        grid: List[List[str]],
        score: int,
        alive: bool,
        direction: Optional[str] = None,
        head: Optional[Tuple[int, int]] = None,
    ):
        self.grid = grid
        self.score = score
        self.alive = alive
        self.direction = direction
        self.head = head

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        return self.grid[y][x]

    def status_lines(self) -> List[str]:
        lines = [f"Score: {self.score}"]
        if not self.alive:
            lines.append(DEATH_PROMPT)
        return lines

    def to_text(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        @ = food
        0 = snake body (and the head before the first move)
        ^ v < > = snake head pointing in its direction of travel
        . = empty space
        followed by a blank line and the status lines.
        """
        rows = ["".join(GLYPHS[cell] for cell in row) for row in self.grid]
        return "\n".join(rows) + "\n\n" + "\n".join(self.status_lines()) + "\n"

    def __repr__(self):
        return (
            f"<BoardView {self.width}x{self.height}, score={self.score}, "
            f"alive={self.alive}, direction={self.direction}>"
        )
