"""
Random player implementation - picks random safe moves for demo mode.
"""

import random
from typing import List, Optional

from domain.board_view import BoardView
from domain.constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE, DIRECTION_DELTA,
    RESTART, WALL, BODY,
)
from .base import Player

BLOCKING_CELLS = {WALL, BODY}


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding walls and its own body.

    After dying it asks for a restart, so demo mode keeps playing forever.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def get_input(self, view: BoardView) -> Optional[str]:
        if not view.alive:
            return RESTART

        head_x, head_y = view.head

        # Calculate all possible next positions; a reversal would be ignored
        possible_moves = {
            move: (head_x + dx, head_y + dy)
            for move, (dx, dy) in DIRECTION_DELTA.items()
            if view.direction is None or move != OPPOSITE[view.direction]
        }

        valid_moves: List[str] = []
        for move in (UP, DOWN, LEFT, RIGHT):
            if move not in possible_moves:
                continue
            new_x, new_y = possible_moves[move]
            if not (0 <= new_x < view.width and 0 <= new_y < view.height):
                continue
            if view.cell(new_x, new_y) in BLOCKING_CELLS:
                continue
            valid_moves.append(move)

        # Boxed in: any direction ends the run, the next frame restarts it
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
