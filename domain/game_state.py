"""
GameState - owns the board and advances it one tick at a time.

No I/O happens here. Callers feed one input event per tick and paint the
BoardView returned by render_view().
"""

import logging
import random
from typing import Optional, Tuple

from .board_view import BoardView
from .constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    BODY,
    DIRECTION_DELTA,
    EMPTY,
    FOOD,
    FOOD_MARGIN,
    HEAD_SYMBOLS,
    MIN_BOARD_SIZE,
    OPPOSITE,
    QUIT,
    RESTART,
    VALID_MOVES,
    WALL,
)
from .entity import Entity
from .errors import ConfigurationError
from .snake import Snake

logger = logging.getLogger(__name__)


class GameState:
    """
    The single-player game.

    Attributes:
        running: False once the player asked to quit
        alive: False after hitting a wall or itself, until restart
        width, height: board dimensions (walls included)
        direction: one of UP/DOWN/LEFT/RIGHT, or None before the first move
        entities: walls around the border plus exactly one food
        snake: the player's Snake
        rng: anything with randrange(lo, hi); used for food placement
    """

    def __init__(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT, rng=None):
        if width < MIN_BOARD_SIZE or height < MIN_BOARD_SIZE:
            raise ConfigurationError(
                f"Board must be at least {MIN_BOARD_SIZE}x{MIN_BOARD_SIZE}, got {width}x{height}"
            )
        self.running = True
        self.alive = True
        self.width = width
        self.height = height
        self.direction: Optional[str] = None
        self.entities = []
        self.snake = Snake()
        self.rng = rng if rng is not None else random.Random()

        self.reset()

    def reset(self):
        """Build a fresh board: border walls, one food, a one-cell snake in the centre."""
        self.alive = True
        self.direction = None
        self.entities.clear()
        self.snake.clear()

        for x in range(self.width):
            self.entities.append(Entity(WALL, x, 0))
            self.entities.append(Entity(WALL, x, self.height - 1))
        for y in range(1, self.height - 1):
            self.entities.append(Entity(WALL, 0, y))
            self.entities.append(Entity(WALL, self.width - 1, y))

        fx, fy = self._random_food_cell()
        self.entities.append(Entity(FOOD, fx, fy))

        self.snake.positions.append((self.width // 2, self.height // 2))
        logger.debug("Board reset: %dx%d, food at %s", self.width, self.height, (fx, fy))

    def _random_food_cell(self) -> Tuple[int, int]:
        x = self.rng.randrange(FOOD_MARGIN, self.width - FOOD_MARGIN)
        y = self.rng.randrange(FOOD_MARGIN, self.height - FOOD_MARGIN)
        return (x, y)

    @property
    def food(self) -> Entity:
        return next(e for e in self.entities if e.is_food)

    @property
    def score(self) -> int:
        return self.snake.score

    def step_forward(self) -> Optional[Tuple[int, int]]:
        """
        Shift the snake one cell in the current direction.

        Drops the tail and adds a new head. With no direction yet the snake
        stays put. No bounds or collision checks happen here.

        Returns:
            The removed tail, or None if the snake did not move.
        """
        head = self.snake.head
        tail = self.snake.positions.popleft()

        if self.direction is None:
            self.snake.positions.appendleft(tail)
            return None

        dx, dy = DIRECTION_DELTA[self.direction]
        self.snake.positions.append((head[0] + dx, head[1] + dy))
        return tail

    def handle_input(self, event: Optional[str]):
        if event == QUIT:
            logger.info("Quit requested at score %d", self.score)
            self.running = False
        elif event == RESTART:
            if not self.alive:
                logger.info("Restarting after death with score %d", self.score)
                self.reset()
        elif event in VALID_MOVES:
            if not self.alive:
                return
            if self.direction is not None and event == OPPOSITE[self.direction]:
                logger.debug("Ignoring reversal %s while moving %s", event, self.direction)
                return
            self.direction = event

    def tick(self, event: Optional[str] = None):
        """
        Apply one input event, then advance the world by one step.

        Order of checks after moving:
          1) Food or wall under the new head (food relocates, wall kills)
          2) Head on its own body (kills)
          3) Growth: the tail dropped by the move is put back

        An idle snake (no direction yet) still eats food under its head. It
        grows by stacking a segment on its own cell, which spreads out once
        it starts moving.
        """
        self.handle_input(event)

        if not self.alive:
            return

        tail = self.step_forward()
        head = self.snake.head
        grow = False
        for entity in self.entities:
            if entity.position != head:
                continue
            if entity.is_food:
                entity.x, entity.y = self._random_food_cell()
                grow = True
                logger.debug("Ate food at %s, next food at %s", head, entity.position)
            else:
                self.alive = False
                logger.info("Snake hit a wall at %s with score %d", head, self.score)
                return

        # Stacked segments of an idle snake share the head cell.
        if tail is not None and head in self.snake.body:
            self.alive = False
            logger.info("Snake ran into itself at %s with score %d", head, self.score)
            return

        if grow:
            self.snake.positions.appendleft(tail if tail is not None else head)

    def render_view(self) -> BoardView:
        """Return a snapshot of the board; the game state is left untouched."""
        grid = [[EMPTY for _ in range(self.width)] for _ in range(self.height)]

        for entity in self.entities:
            grid[entity.y][entity.x] = entity.kind

        for x, y in self.snake.body:
            grid[y][x] = BODY

        hx, hy = self.snake.head
        grid[hy][hx] = HEAD_SYMBOLS[self.direction]

        return BoardView(
            grid=grid,
            score=self.score,
            alive=self.alive,
            direction=self.direction,
            head=(hx, hy),
        )

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height}, alive={self.alive}, "
            f"running={self.running}, direction={self.direction}, snake={list(self.snake)}>"
        )
