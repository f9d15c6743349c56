import logging
from collections.abc import Iterator

import numpy as np

from .constants import (
    BLACK,
    BOARD_DIM,
    COLOR_VALUES,
    DIRECTIONS,
    EMPTY,
    STARTING_DISCS,
    WHITE,
    Color,
    letters,
)
from .disc import Disc
from .errors import IllegalMoveError, InvalidPositionError

logger = logging.getLogger(__name__)

Position = tuple[int, int]
Direction = tuple[int, int]


def _make_grid() -> list[list[Disc | None]]:
    """Returns an 8x8 grid holding the four starting discs."""
    grid: list[list[Disc | None]] = [[None] * BOARD_DIM for _ in range(BOARD_DIM)]
    for (row, col), color in STARTING_DISCS.items():
        grid[row][col] = Disc(color)
    return grid


class Board:
    """An 8x8 Reversi board and the rules for placing discs on it.

    The board exclusively owns every ``Disc`` on its grid. Cells only go from
    empty (``None``) to occupied, and ``place_disc`` is the only method that
    mutates the grid. The class is not thread-safe; callers serialize access.
    """

    def __init__(self) -> None:
        """Initialize a board with the standard starting layout."""
        self.grid = _make_grid()

    @staticmethod
    def is_valid_position(pos: Position) -> bool:
        """Check if a position lies on the board."""
        row, col = pos
        return 0 <= row < BOARD_DIM and 0 <= col < BOARD_DIM

    def is_occupied(self, pos: Position) -> bool:
        """Check if a position holds a disc. Off-board positions are never occupied."""
        if not self.is_valid_position(pos):
            return False
        return self.grid[pos[0]][pos[1]] is not None

    def get_piece(self, pos: Position) -> Disc | None:
        """Returns the disc at ``pos``, or None if the cell is empty.

        Raises:
            InvalidPositionError: If ``pos`` is off the board.
        """
        if not self.is_valid_position(pos):
            raise InvalidPositionError(pos)
        return self.grid[pos[0]][pos[1]]

    def is_same_color(self, pos: Position, color: Color) -> bool:
        """Check if the disc at ``pos`` has ``color``. Empty or off-board cells never match."""
        if not self.is_occupied(pos):
            return False
        return self.grid[pos[0]][pos[1]].color == color

    def positions_to_flip(
        self, origin: Position, color: Color, direction: Direction
    ) -> list[Position]:
        """Returns the opponent discs captured along one direction from ``origin``.

        Walks away from ``origin`` collecting opposite-color discs until a disc of
        ``color`` closes the run. Running off the board or into an empty cell
        captures nothing, as does a same-color disc directly next to ``origin``.
        Positions are in scan order, nearest first. ``origin`` itself is never
        included.
        """
        d_row, d_col = direction
        row, col = origin
        run: list[Position] = []
        while True:
            row, col = row + d_row, col + d_col
            pos = (row, col)
            if not self.is_occupied(pos):
                return []
            if self.is_same_color(pos, color):
                return run
            run.append(pos)

    def _flip_runs(self, pos: Position, color: Color) -> list[Position]:
        """Union of captured positions over all directions, direction by direction."""
        flips: list[Position] = []
        for direction in DIRECTIONS:
            flips.extend(self.positions_to_flip(pos, color, direction))
        return flips

    def is_legal_move(self, pos: Position, color: Color) -> bool:
        """Check that ``pos`` is empty and placing ``color`` there captures something."""
        if not self.is_valid_position(pos) or self.is_occupied(pos):
            return False
        return any(self.positions_to_flip(pos, color, direction) for direction in DIRECTIONS)

    def place_disc(self, pos: Position, color: Color) -> list[Position]:
        """Place a disc of ``color`` at ``pos`` and flip every captured disc.

        Returns:
            The positions whose discs were flipped.

        Raises:
            IllegalMoveError: If the move is not legal. The board is left unchanged.
        """
        if not self.is_legal_move(pos, color):
            raise IllegalMoveError(pos, color)

        flips = self._flip_runs(pos, color)
        self.grid[pos[0]][pos[1]] = Disc(color)
        for flip_pos in flips:
            self.grid[flip_pos[0]][flip_pos[1]].flip()

        logger.debug("Placed %s at %s, flipped %d discs", color, pos, len(flips))
        return flips

    def legal_moves(self, color: Color) -> list[Position]:
        """Returns all legal positions for ``color`` in row-major order."""
        return [
            (row, col)
            for row in range(BOARD_DIM)
            for col in range(BOARD_DIM)
            if self.is_legal_move((row, col), color)
        ]

    def has_any_move(self, color: Color) -> bool:
        return len(self.legal_moves(color)) > 0

    def is_terminal(self) -> bool:
        """Check if both colors are out of moves."""
        return not self.has_any_move(BLACK) and not self.has_any_move(WHITE)

    def iter_discs(self) -> Iterator[tuple[Position, Disc]]:
        """Yield ``(position, disc)`` for every occupied cell in row-major order."""
        for row, cells in enumerate(self.grid):
            for col, disc in enumerate(cells):
                if disc is not None:
                    yield (row, col), disc

    def count(self, color: Color) -> int:
        return sum(1 for _, disc in self.iter_discs() if disc.color == color)

    def score(self) -> dict[Color, int]:
        """Returns the number of discs of each color."""
        return {BLACK: self.count(BLACK), WHITE: self.count(WHITE)}

    def winner(self) -> Color | None:
        """Returns the color with more discs, or None on a tie."""
        black, white = self.count(BLACK), self.count(WHITE)
        if black == white:
            return None
        return BLACK if black > white else WHITE

    def copy(self) -> "Board":
        """Returns an independent copy with its own discs."""
        board = Board.__new__(Board)
        board.grid = [[None] * BOARD_DIM for _ in range(BOARD_DIM)]
        for (row, col), disc in self.iter_discs():
            board.grid[row][col] = Disc(disc.color)
        return board

    def to_array(self) -> np.ndarray:
        """Returns the board as an 8x8 int8 array (BLACK=-1, WHITE=1, EMPTY=0)."""
        array = np.full((BOARD_DIM, BOARD_DIM), EMPTY, dtype=np.int8)
        for (row, col), disc in self.iter_discs():
            array[row, col] = COLOR_VALUES[disc.color]
        return array

    def render(self) -> str:
        """Returns a text dump of the grid, one line per row."""
        lines = ["     " + " ".join(letters.upper())]
        for row, cells in enumerate(self.grid):
            markers = " ".join("*" if disc is None else str(disc) for disc in cells)
            lines.append(f" {row} | {markers}")
        return "\n".join(lines)

    def print_board(self) -> None:
        """Prints the board state."""
        print(self.render())

    def __str__(self) -> str:
        return self.render()
