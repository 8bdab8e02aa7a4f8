"""
Snake game engine: session state, the per-tick update and the loop controller.
"""

import logging
import random
import time
from typing import Callable, List, Optional, Tuple

from domain.constants import (
    RIGHT, VALID_MOVES, QUIT, WRAP, SOLID, BOUNDARY_POLICIES,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_BASE_SPEED, DEFAULT_NUM_APPLES,
    SPEED_STEP, MIN_DIMENSION,
)
from domain.game_state import GameState
from domain.grid import build_walls, interior_cells, is_interior, project_head
from domain.snake import Snake

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class SnakeGame:
    """
    Manages:
      - Board (width, height) and its wall ring
      - The snake and its heading
      - Apples
      - Speed
      - Tick counter and game over state
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        base_speed: int = DEFAULT_BASE_SPEED,
        num_apples: int = DEFAULT_NUM_APPLES,
        boundary: str = WRAP,
        rng: Optional[random.Random] = None,
    ):
        if width < MIN_DIMENSION or height < MIN_DIMENSION:
            raise ValueError(
                f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, got {width}x{height}."
            )
        if base_speed < 1:
            raise ValueError(f"Base speed must be at least 1, got {base_speed}.")
        if num_apples < 1:
            raise ValueError(f"Number of apples must be at least 1, got {num_apples}.")
        if boundary not in BOUNDARY_POLICIES:
            raise ValueError(f"Unknown boundary policy '{boundary}'.")

        self.width = width
        self.height = height
        self.base_speed = base_speed
        self.speed = base_speed
        self.num_apples = num_apples
        self.boundary = boundary
        self.rng = rng or random.Random()

        self.walls = build_walls(width, height)
        self.tick_number = 0
        self.game_over = False
        self.aborted = False

        self.heading = RIGHT
        self.snake = Snake([self.rng.choice(interior_cells(width, height))])

        self.apples: List[Cell] = []
        for _ in range(self.num_apples):
            cell = self._random_free_cell()
            if cell is None:
                break
            self.apples.append(cell)

        logger.info(
            "New %dx%d session: snake at %s, apples %s, speed %d, boundary %s",
            width, height, self.snake.head, self.apples, self.speed, boundary,
        )

    def place_snake(self, positions: List[Cell], heading: str = RIGHT):
        """
        Replace the snake with one occupying the given cells (head first).
        Used for deterministic setups.
        """
        if heading not in VALID_MOVES:
            raise ValueError(f"Unknown heading '{heading}'.")
        for cell in positions:
            if not is_interior(cell, self.width, self.height):
                raise ValueError(f"Snake cell outside the interior at {cell}.")
        self.snake = Snake(list(positions))
        self.heading = heading

    def set_apples(self, apple_positions: List[Cell]):
        """
        Place apples at specified positions instead of random ones.
        """
        for cell in apple_positions:
            if not is_interior(cell, self.width, self.height):
                raise ValueError(f"Apple outside the interior at {cell}.")
        self.apples = list(apple_positions)
        logger.debug("Set %d apples on the board: %s", len(self.apples), self.apples)

    def _random_free_cell(self) -> Optional[Cell]:
        """
        Return a random interior cell not occupied by the snake or an apple,
        or None when the board is full.
        """
        free = [
            cell for cell in interior_cells(self.width, self.height)
            if cell not in self.snake and cell not in self.apples
        ]
        if not free:
            return None
        return self.rng.choice(free)

    @property
    def tick_delay(self) -> float:
        """Seconds to wait before the next tick at the current speed."""
        return 1.0 / self.speed

    @property
    def score(self) -> int:
        return len(self.snake)

    def change_heading(self, move: Optional[str]):
        # Reversal into the body is allowed and is fatal on the same tick.
        if move in VALID_MOVES:
            self.heading = move

    def tick(self, move: Optional[str] = None) -> bool:
        """
        Execute one tick:
          1) Apply the pending direction, if any
          2) Compute the next head (boundary policy applied)
          3) Check wall and self collisions
          4) Eat an apple (grow + speed up) or drop the tail
          5) Insert the new head

        Returns True while the session continues, False once it is over.
        """
        if self.game_over:
            logger.debug("Game is already over. Ignoring tick.")
            return False

        self.change_heading(move)
        nxt = project_head(self.snake.head, self.heading, self.width, self.height, self.boundary)

        if self.boundary == SOLID and nxt in self.walls:
            self.end_game("wall", nxt)
            return False

        if nxt in self.snake:
            self.end_game("self", nxt)
            return False

        if nxt in self.apples:
            self.apples.remove(nxt)
            self.speed += SPEED_STEP
            self.snake.positions.appendleft(nxt)
            cell = self._random_free_cell()
            if cell is not None:
                self.apples.append(cell)
            logger.debug("Apple eaten at %s, length %d, speed %d", nxt, self.score, self.speed)
        else:
            self.snake.positions.pop()
            self.snake.positions.appendleft(nxt)

        self.tick_number += 1
        return True

    def end_game(self, reason: str, cell: Optional[Cell] = None):
        self.game_over = True
        self.snake.kill(reason, self.tick_number)
        logger.info(
            "Game over at tick %d: %s collision at %s, score %d",
            self.tick_number, reason, cell, self.score,
        )

    def abort(self):
        """Stop the session without a collision (player quit)."""
        self.game_over = True
        self.aborted = True
        logger.info("Session aborted at tick %d, score %d", self.tick_number, self.score)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            width=self.width,
            height=self.height,
            snake=list(self.snake.positions),
            heading=self.heading,
            speed=self.speed,
            apples=self.apples.copy(),
            walls=self.walls,
            alive=self.snake.alive,
            death_reason=self.snake.death_reason,
            boundary=self.boundary,
        )


def run_session(
    game: SnakeGame,
    player,
    renderer=None,
    sleep: Callable[[float], None] = time.sleep,
    max_ticks: Optional[int] = None,
) -> GameState:
    """
    Drive one session until the snake dies, the player quits or max_ticks
    ticks have been applied.

    Each iteration waits for the tick delay, polls the player for at most
    one move, advances the game and redraws. Returns the final GameState.
    """
    if renderer is not None:
        renderer.render(game.get_current_state())

    while not game.game_over:
        if max_ticks is not None and game.tick_number >= max_ticks:
            logger.info("Reached max ticks (%d).", max_ticks)
            break

        sleep(game.tick_delay)

        move = player.get_move(game.get_current_state())
        if move == QUIT:
            game.abort()
            break

        if not game.tick(move):
            break

        if renderer is not None:
            renderer.render(game.get_current_state())

    return game.get_current_state()
