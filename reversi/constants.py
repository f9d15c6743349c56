"""Constants for the Reversi rules engine."""

from enum import StrEnum


class Color(StrEnum):
    """Disc color. The color space is closed under ``opposite``."""

    BLACK = "black"
    WHITE = "white"

    @property
    def opposite(self) -> "Color":
        """The other color."""
        return Color.WHITE if self is Color.BLACK else Color.BLACK


### Board
BLACK = Color.BLACK
WHITE = Color.WHITE
BOARD_DIM = 8
DIRECTIONS = [(i, j) for i in [-1, 0, 1] for j in [-1, 0, 1] if not (i == 0 and j == 0)]

# W[d4, e5], B[e4, d5]
STARTING_DISCS: dict[tuple[int, int], Color] = {
    (3, 3): WHITE,
    (3, 4): BLACK,
    (4, 3): BLACK,
    (4, 4): WHITE,
}

### Array encoding
EMPTY = 0
COLOR_VALUES: dict[Color, int] = {BLACK: -1, WHITE: 1}

### Square notation
letters = "abcdefgh"
number = "12345678"

tuple2move = {(i, j): letters[j] + number[i] for i in range(BOARD_DIM) for j in range(BOARD_DIM)}

move2tuple = {letters[j] + number[i]: (i, j) for i in range(BOARD_DIM) for j in range(BOARD_DIM)}
