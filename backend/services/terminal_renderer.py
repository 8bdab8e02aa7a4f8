"""
Terminal rendering service for the snake game.

Draws the game on a curses window:
- Wall ring, snake and apples with distinct glyphs and colors
- A score line below the board
- The start menu
- The highscore count-up shown after a session ends
"""

import curses
import logging
import time
from typing import Callable

from domain.constants import WALL_GLYPH, SNAKE_GLYPH, APPLE_GLYPH
from domain.game_state import GameState

logger = logging.getLogger(__name__)

# Highscore screen settings
SCORE_ROW = 10
SCORE_COL = 20
FINAL_SCORE_HOLD_SECONDS = 3.0

MENU_TEXT = (
    "Welcome to snake!\n"
    "What to do?\n"
    "p\tplay\n"
    "q\tquit\n"
)


class ColorScheme:
    """curses color pair ids and their foreground/background colors"""

    SNAKE_PAIR = 1
    APPLE_PAIR = 2
    DEFAULT_PAIR = 3

    SNAKE = curses.COLOR_GREEN
    APPLE = curses.COLOR_RED
    FOREGROUND = curses.COLOR_WHITE
    BACKGROUND = curses.COLOR_BLACK


class TerminalTooSmallError(RuntimeError):
    """Raised when the terminal cannot fit the board and the score line."""


class TerminalRenderer:
    """Render game state snapshots onto a curses window"""

    def __init__(self, window, sleep: Callable[[float], None] = time.sleep):
        self.window = window
        self.sleep = sleep

    def setup(self):
        """
        Prepare the terminal: colors, hidden cursor, no echo, arrow keys.
        Must run after curses.initscr (curses.wrapper does that).
        """
        if curses.has_colors():
            curses.start_color()
            curses.init_pair(ColorScheme.SNAKE_PAIR, ColorScheme.SNAKE, ColorScheme.BACKGROUND)
            curses.init_pair(ColorScheme.APPLE_PAIR, ColorScheme.APPLE, ColorScheme.BACKGROUND)
            curses.init_pair(ColorScheme.DEFAULT_PAIR, ColorScheme.FOREGROUND, ColorScheme.BACKGROUND)
        else:
            logger.info("Terminal has no color support, drawing in monochrome")
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals cannot hide the cursor
            logger.debug("Terminal does not support hiding the cursor")
        self.window.nodelay(False)
        self.window.keypad(True)

    def ensure_fits(self, width: int, height: int):
        """
        Raise TerminalTooSmallError if the board plus score line does not fit.
        """
        rows, cols = self.window.getmaxyx()
        if rows < height + 2 or cols < width + 1:
            raise TerminalTooSmallError(
                f"Terminal is {cols}x{rows}, need at least {width + 1}x{height + 2} for the board."
            )

    def set_input_blocking(self, blocking: bool):
        self.window.nodelay(not blocking)

    def render(self, state: GameState):
        w = self.window
        w.clear()

        w.attrset(curses.color_pair(ColorScheme.DEFAULT_PAIR))
        for row, col in state.walls:
            # The bottom-right corner cannot be written without scrolling
            try:
                w.addch(row, col, WALL_GLYPH)
            except curses.error:
                if (row, col) != (state.height - 1, state.width - 1):
                    raise

        w.attrset(curses.color_pair(ColorScheme.SNAKE_PAIR))
        for row, col in state.snake:
            w.addch(row, col, SNAKE_GLYPH)

        w.attrset(curses.color_pair(ColorScheme.APPLE_PAIR))
        for row, col in state.apples:
            w.addch(row, col, APPLE_GLYPH)

        w.attrset(curses.color_pair(ColorScheme.DEFAULT_PAIR))
        w.addstr(state.height, 0, f"Score: {state.score}")

        w.refresh()

    def _draw_score(self, value: int):
        self.window.clear()
        self.window.addstr(SCORE_ROW, SCORE_COL, f"Score: {value}")
        self.window.refresh()

    def highscore(self, score: int):
        """
        Count up to the final score, speeding up as it gets closer, then hold
        the final score in the apple color.
        """
        self.window.attrset(curses.color_pair(ColorScheme.DEFAULT_PAIR))
        remaining = score
        while remaining > 1:
            remaining -= 1
            self._draw_score(score - remaining)
            self.sleep(1.0 / remaining)

        self.window.attrset(curses.color_pair(ColorScheme.APPLE_PAIR))
        self._draw_score(score)
        self.sleep(FINAL_SCORE_HOLD_SECONDS)

    def menu(self) -> int:
        """Show the start menu and block until a key is pressed."""
        self.window.clear()
        self.window.attrset(curses.color_pair(ColorScheme.DEFAULT_PAIR))
        self.window.addstr(0, 0, MENU_TEXT)
        self.window.refresh()
        return self.window.getch()
