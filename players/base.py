"""
Base player interface for the game loop.
"""

from typing import Optional

from domain.board_view import BoardView


class Player:
    """
    Base class/interface for input sources.

    Each player returns one input event per tick given the last frame.
    """

    def get_input(self, view: BoardView) -> Optional[str]:
        """
        Return the input event for the next tick.

        Args:
            view: The frame currently on screen

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", "QUIT", "RESTART", or None
        """
        raise NotImplementedError
