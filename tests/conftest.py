"""Pytest configuration and fixtures for reversi tests."""

from collections.abc import Callable

import pytest

from reversi.board import Board, Position
from reversi.constants import BLACK, BOARD_DIM, WHITE, Color
from reversi.disc import Disc


@pytest.fixture
def board() -> Board:
    """Fresh Board with the starting layout."""
    return Board()


@pytest.fixture
def make_board() -> Callable[[dict[Position, Color]], Board]:
    """Factory building a Board that holds exactly the given discs."""

    def _make(discs: dict[Position, Color]) -> Board:
        board = Board()
        board.grid = [[None] * BOARD_DIM for _ in range(BOARD_DIM)]
        for (row, col), color in discs.items():
            board.grid[row][col] = Disc(color)
        return board

    return _make


@pytest.fixture
def board_after_opening() -> Board:
    """Board after black plays (5,4) and white replies (5,5)."""
    board = Board()
    board.place_disc((5, 4), BLACK)
    board.place_disc((5, 5), WHITE)
    return board
