"""
Game constants for the terminal Snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (dx, dy) per direction; y grows downwards on screen
DIRECTION_DELTA = {
    UP:    (0, -1),
    DOWN:  (0, 1),
    LEFT:  (-1, 0),
    RIGHT: (1, 0),
}

# Input events besides the four directions. "No key" is None.
QUIT = "QUIT"
RESTART = "RESTART"
VALID_INPUTS = VALID_MOVES | {QUIT, RESTART}

# Entity kinds
WALL = "WALL"
FOOD = "FOOD"

# Cell symbols produced by GameState.render_view()
EMPTY = "EMPTY"
BODY = "BODY"
HEAD_UP = "HEAD_UP"
HEAD_DOWN = "HEAD_DOWN"
HEAD_LEFT = "HEAD_LEFT"
HEAD_RIGHT = "HEAD_RIGHT"
HEAD_IDLE = "HEAD_IDLE"

HEAD_SYMBOLS = {
    UP: HEAD_UP,
    DOWN: HEAD_DOWN,
    LEFT: HEAD_LEFT,
    RIGHT: HEAD_RIGHT,
    None: HEAD_IDLE,
}

GLYPHS = {
    EMPTY: ".",
    WALL: "#",
    FOOD: "@",
    BODY: "0",
    HEAD_UP: "^",
    HEAD_DOWN: "v",
    HEAD_LEFT: "<",
    HEAD_RIGHT: ">",
    HEAD_IDLE: "0",
}

# Board settings
BOARD_WIDTH = 40
BOARD_HEIGHT = 20
MIN_BOARD_SIZE = 5  # food needs a non-empty [2, size - 2) range
FOOD_MARGIN = 2

DEATH_PROMPT = "You died. Press 'R' to restart"
