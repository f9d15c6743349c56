"""Exceptions raised by the rules engine."""


class ReversiError(Exception):
    """Base class for rules engine errors."""


class InvalidPositionError(ReversiError, IndexError):
    """Coordinates fall outside the 8x8 grid."""

    def __init__(self, pos: tuple[int, int]) -> None:
        super().__init__(f"Position {pos} is outside the board.")
        self.pos = pos


class IllegalMoveError(ReversiError, ValueError):
    """A disc cannot be placed at the requested position."""

    def __init__(self, pos: tuple[int, int], color: str) -> None:
        super().__init__(f"Move {pos} is illegal for {color} in current board state.")
        self.pos = pos
        self.color = color
