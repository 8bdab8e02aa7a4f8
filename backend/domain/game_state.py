"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, FrozenSet, Optional

from .constants import WALL_GLYPH, SNAKE_GLYPH, APPLE_GLYPH, EMPTY_GLYPH

Cell = Tuple[int, int]


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Renderers and players only ever see this snapshot; the running
    SnakeGame owns the mutable state.

    Attributes:
        tick_number: how many ticks have been applied (0-based)
        width, height: board dimensions
        snake: list of (row, col) from head to tail
        heading: current direction (UP, DOWN, LEFT, RIGHT)
        speed: ticks per second
        apples: list of (row, col) positions of all apples on the board
        walls: the boundary ring of the board
        alive: whether the snake is still alive
        death_reason: 'self', 'wall' or None
        boundary: boundary policy of the session ('wrap' or 'solid')
    """

    def __init__(
        self,
        tick_number: int,
        width: int,
        height: int,
        snake: List[Cell],
        heading: str,
        speed: int,
        apples: List[Cell],
        walls: FrozenSet[Cell],
        alive: bool = True,
        death_reason: Optional[str] = None,
        boundary: str = "wrap",
    ):
        self.tick_number = tick_number
        self.width = width
        self.height = height
        self.snake = snake
        self.heading = heading
        self.speed = speed
        self.apples = apples
        self.walls = walls
        self.alive = alive
        self.death_reason = death_reason
        self.boundary = boundary

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def score(self) -> int:
        """The score is the snake length."""
        return len(self.snake)

    def print_board(self) -> str:
        """
        Returns a string representation of the board using the terminal glyphs:
        # = wall
        O = snake
        o = apple
        Row 0 is the top line, followed by a score line.
        """
        board = [[EMPTY_GLYPH for _ in range(self.width)] for _ in range(self.height)]

        for row, col in self.walls:
            board[row][col] = WALL_GLYPH
        for row, col in self.snake:
            board[row][col] = SNAKE_GLYPH
        for row, col in self.apples:
            board[row][col] = APPLE_GLYPH

        result = ["".join(line) for line in board]
        result.append(f"Score: {self.score}")
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, head={self.head}, "
            f"heading={self.heading}, speed={self.speed}, apples={self.apples}, "
            f"score={self.score}, alive={self.alive}>"
        )
