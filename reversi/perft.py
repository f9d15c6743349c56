"""Move-tree node counting for verifying the rules engine.

``perft`` walks every legal line of play to a fixed depth and counts the leaves.
The totals from the starting position are well known, so any bug in move
generation or flipping shows up as a wrong count.
"""

from __future__ import annotations

from .board import Board, Position
from .constants import Color


def perft(board: Board, color: Color, depth: int) -> int:
    """Count leaf nodes of the move tree ``depth`` plies below ``board``.

    A side with no legal move passes, which uses up one ply, as long as the
    opponent can still move. A position where neither side can move is a leaf.

    Args:
        board: Position to search from. It is not modified.
        color: Side to move.
        depth: Number of plies to search.

    Returns:
        Number of leaf nodes.
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if depth == 0:
        return 1

    moves = board.legal_moves(color)
    if not moves:
        if not board.has_any_move(color.opposite):
            return 1
        return perft(board, color.opposite, depth - 1)

    nodes = 0
    for move in moves:
        child = board.copy()
        child.place_disc(move, color)
        nodes += perft(child, color.opposite, depth - 1)
    return nodes


def divide(board: Board, color: Color, depth: int) -> dict[Position, int]:
    """Returns the perft count below each legal root move.

    Args:
        board: Position to search from. It is not modified.
        color: Side to move.
        depth: Number of plies to search, counting the root move. Must be at least 1.
    """
    if depth < 1:
        raise ValueError(f"divide needs depth >= 1, got {depth}")

    counts: dict[Position, int] = {}
    for move in board.legal_moves(color):
        child = board.copy()
        child.place_disc(move, color)
        counts[move] = perft(child, color.opposite, depth - 1)
    return counts
