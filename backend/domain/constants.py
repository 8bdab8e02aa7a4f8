"""
Game constants for the terminal snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (row, col) deltas; row grows downwards on the terminal
DIRECTION_VECTORS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Returned by a player to leave the running session
QUIT = "QUIT"

# Boundary policies
WRAP = "wrap"
SOLID = "solid"
BOUNDARY_POLICIES = {WRAP, SOLID}

# Game settings
DEFAULT_WIDTH = 42
DEFAULT_HEIGHT = 22
DEFAULT_BASE_SPEED = 4   # ticks per second
DEFAULT_NUM_APPLES = 1
SPEED_STEP = 1           # speed gained per apple
MIN_DIMENSION = 3        # smallest grid that still has an interior cell

# Glyphs
WALL_GLYPH = "#"
SNAKE_GLYPH = "O"
APPLE_GLYPH = "o"
EMPTY_GLYPH = " "
