from .board import Board
from .constants import BLACK, WHITE, Color
from .disc import Disc
from .errors import IllegalMoveError, InvalidPositionError, ReversiError

__all__ = [
    "BLACK",
    "WHITE",
    "Board",
    "Color",
    "Disc",
    "IllegalMoveError",
    "InvalidPositionError",
    "ReversiError",
]
