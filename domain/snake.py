"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple

from .errors import InvariantViolation


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) ordered tail -> head, so the tail is
            positions[0] and the head is positions[-1]
    """

    def __init__(self, positions: Iterable[Tuple[int, int]] = ()):
        self.positions = deque(positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (last element)."""
        if not self.positions:
            raise InvariantViolation("snake has no segments")
        return self.positions[-1]

    @property
    def body(self) -> List[Tuple[int, int]]:
        """Every segment except the head, tail first."""
        return list(self.positions)[:-1]

    @property
    def score(self) -> int:
        return len(self.positions) - 1

    def clear(self):
        self.positions.clear()

    def __repr__(self):
        return f"<Snake length={len(self.positions)} positions={list(self.positions)}>"
