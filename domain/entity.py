"""
Entity - a wall block or a piece of food on the board.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import FOOD, WALL


@dataclass
class Entity:
    kind: str
    x: int
    y: int

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_wall(self) -> bool:
        return self.kind == WALL

    @property
    def is_food(self) -> bool:
        return self.kind == FOOD
