"""Count move-tree leaves from the starting position to check the rules engine."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from tqdm import tqdm

from reversi.board import Board
from reversi.constants import Color, tuple2move
from reversi.perft import perft

logger = logging.getLogger(__name__)


def run_divide(board: Board, color: Color, depth: int) -> int:
    """Log the perft count below each root move and return the total."""
    total = 0
    for move in tqdm(board.legal_moves(color), desc=f"perft {depth}", unit="move"):
        child = board.copy()
        child.place_disc(move, color)
        nodes = perft(child, color.opposite, depth - 1)
        logger.info("%s: %d", tuple2move[move], nodes)
        total += nodes
    return total


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run perft on the standard starting position.")
    parser.add_argument(
        "--depth",
        type=int,
        default=5,
        help="Number of plies to search (default: 5)",
    )
    parser.add_argument(
        "--color",
        type=str,
        default=Color.BLACK.value,
        choices=[c.value for c in Color],
        help="Side to move first (default: black)",
    )
    parser.add_argument(
        "--divide",
        action="store_true",
        help="Report counts for each root move",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug-level logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.depth < 1:
        logger.error("Depth must be at least 1. Got --depth=%d.", args.depth)
        sys.exit(1)

    board = Board()
    color = Color(args.color)
    logger.info("Starting position, %s to move:\n%s", color, board.render())

    start = time.time()
    if args.divide:
        total = run_divide(board, color, args.depth)
    else:
        total = perft(board, color, args.depth)
    logger.info("perft(%d) = %d in %.2fs", args.depth, total, time.time() - start)
