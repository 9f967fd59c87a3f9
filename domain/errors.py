"""
Exceptions raised by the game engine.

Collisions are not errors: a dead snake is an ordinary game state. These
classes cover invalid setup and broken internal invariants only.
"""


class SnakeGameError(Exception):
    """Base class for every error raised by the game engine."""


class ConfigurationError(SnakeGameError, ValueError):
    """Invalid settings, e.g. a board too small for food placement."""


class InvariantViolation(SnakeGameError, RuntimeError):
    """Internal state that correct transitions can never produce."""
