import argparse
import curses
import logging
import os
import random
import sys
import time
from typing import Any, Callable, Dict, Optional

from config import Settings, configure_logging, load_settings
from domain.constants import BOARD_HEIGHT, BOARD_WIDTH
from domain.errors import ConfigurationError
from domain.game_state import GameState
from players import KeyboardPlayer, Player, RandomPlayer
from services.terminal_renderer import TerminalRenderer, TerminalTooSmallError

logger = logging.getLogger(__name__)


# -------------------------------
# Game Loop
# -------------------------------

def run_game(
    game: GameState,
    player: Player,
    renderer,
    tick_seconds: float,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Runs the game until the player quits.

    Each iteration asks the player for one input event, advances the game by
    one tick, paints the new frame and sleeps for the tick interval.

    Args:
        game: The game to drive.
        player: Input source; receives the frame currently on screen.
        renderer: Anything with paint(view).
        tick_seconds: Delay between frames.
        sleep: Replaced in tests to avoid real delays.
        max_ticks: Optional upper limit, used by tests and demo runs.

    Returns:
        A dictionary summarizing the session (ticks, final_score, alive).
    """
    ticks = 0
    view = game.render_view()
    renderer.paint(view)

    while game.running:
        if max_ticks is not None and ticks >= max_ticks:
            logger.info("Stopping after %d ticks", ticks)
            break

        event = player.get_input(view)
        game.tick(event)
        view = game.render_view()
        renderer.paint(view)
        ticks += 1

        sleep(tick_seconds)

    return {
        "ticks": ticks,
        "final_score": game.score,
        "alive": game.alive,
    }


def play(window, settings: Settings, demo: bool = False, max_ticks: Optional[int] = None) -> Dict[str, Any]:
    """Set up the terminal, build the game and run it. Called through curses.wrapper."""
    renderer = TerminalRenderer(window, BOARD_WIDTH, BOARD_HEIGHT)
    renderer.setup()

    game = GameState(rng=random.Random(settings.seed))
    if demo:
        player = RandomPlayer(rng=random.Random(settings.seed))
    else:
        player = KeyboardPlayer(window)

    logger.info("Starting %s game (tick=%dms, seed=%s)", "demo" if demo else "interactive",
                settings.tick_ms, settings.seed)
    return run_game(game, player, renderer, settings.tick_seconds, max_ticks=max_ticks)


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal. WASD or arrows to move, R to restart, Esc to quit."
    )
    parser.add_argument("--demo", action="store_true",
                        help="Let a random autopilot play instead of the keyboard")
    parser.add_argument("--tick-ms", type=int, default=None,
                        help="Milliseconds per tick (default: $SNAKE_TICK_MS or 200)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the demo autopilot")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: $SNAKE_LOG_LEVEL or WARNING)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks")

    args = parser.parse_args(argv)

    try:
        settings = load_settings(tick_ms=args.tick_ms, log_level=args.log_level, seed=args.seed)
    except ConfigurationError as e:
        parser.error(str(e))

    configure_logging(settings)

    # Escape is the quit key; don't wait a full second to tell it apart from arrow keys
    os.environ.setdefault("ESCDELAY", "25")

    try:
        result = curses.wrapper(play, settings, args.demo, args.max_ticks)
    except TerminalTooSmallError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nGame interrupted. Goodbye!")
        return 0

    print(f"Thanks for playing Snake! Final score: {result['final_score']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
