import argparse
import curses
import logging
import sys
import time
from typing import Callable, List, Optional

from config import GameConfig, load_config, setup_logging
from domain.game_state import GameState
from game import SnakeGame, run_session
from players import get_player_class, list_players, AVAILABLE_PLAYERS
from services.terminal_renderer import TerminalRenderer

logger = logging.getLogger(__name__)

PLAY_KEY = ord("p")
QUIT_KEY = ord("q")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal. Arrow keys steer, 'q' leaves a running game."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width including the wall (env SNAKE_WIDTH, default 42)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height including the wall (env SNAKE_HEIGHT, default 22)")
    parser.add_argument("--speed", type=int, default=None,
                        help="Starting ticks per second (env SNAKE_BASE_SPEED, default 4)")
    parser.add_argument("--apples", type=int, default=None,
                        help="Apples kept on the board (env SNAKE_NUM_APPLES, default 1)")
    parser.add_argument("--boundary", type=str, default=None, choices=["wrap", "solid"],
                        help="Wrap around the edges or die on the wall (env SNAKE_BOUNDARY, default wrap)")
    player_help = "; ".join(f"'{p['key']}': {p['description']}" for p in list_players())
    parser.add_argument("--player", type=str, default="keyboard", choices=AVAILABLE_PLAYERS,
                        help=f"Who steers the snake ({player_help})")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (env SNAKE_LOG_LEVEL, default WARNING)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (env SNAKE_LOG_FILE)")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace, env=None) -> GameConfig:
    """
    Merge command line overrides on top of the environment configuration.

    Raises:
        ValueError: If the merged configuration is invalid
    """
    config = load_config(env)
    overrides = {
        "width": args.width,
        "height": args.height,
        "base_speed": args.speed,
        "num_apples": args.apples,
        "boundary": args.boundary,
        "log_level": args.log_level.upper() if args.log_level else None,
        "log_file": args.log_file,
    }
    for field_name, value in overrides.items():
        if value is not None:
            setattr(config, field_name, value)
    return config.validate()


def play_session(
    window,
    renderer: TerminalRenderer,
    config: GameConfig,
    player_key: str = "keyboard",
    sleep: Callable[[float], None] = time.sleep,
) -> GameState:
    """
    Run one game on the window and show the highscore screen unless the
    player quit mid-game.
    """
    game = SnakeGame(
        width=config.width,
        height=config.height,
        base_speed=config.base_speed,
        num_apples=config.num_apples,
        boundary=config.boundary,
    )

    player_class = get_player_class(player_key)
    if player_key == "keyboard":
        player = player_class(window)
    else:
        player = player_class()

    renderer.set_input_blocking(False)
    try:
        final_state = run_session(game, player, renderer=renderer, sleep=sleep)
    finally:
        renderer.set_input_blocking(True)

    if not game.aborted:
        renderer.highscore(final_state.score)
    return final_state


def run_app(window, config: GameConfig, player_key: str = "keyboard",
            sleep: Callable[[float], None] = time.sleep) -> None:
    """
    Menu loop: 'p' plays a session, 'q' quits, anything else redraws the menu.
    """
    renderer = TerminalRenderer(window, sleep=sleep)
    renderer.setup()
    renderer.ensure_fits(config.width, config.height)

    while True:
        key = renderer.menu()
        if key == PLAY_KEY:
            final_state = play_session(window, renderer, config, player_key, sleep=sleep)
            logger.info("Session finished with score %d after %d ticks",
                        final_state.score, final_state.tick_number)
        elif key == QUIT_KEY:
            break


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(config.log_level, config.log_file)

    try:
        # curses.wrapper restores the terminal before any exception reaches us
        curses.wrapper(run_app, config, args.player)
    except KeyboardInterrupt:
        logger.info("Interrupted, quitting.")
    except Exception as e:
        logger.exception("Unrecoverable terminal failure")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
