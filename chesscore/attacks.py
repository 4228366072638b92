"""Attack detection by casting piece shapes outward from the target square."""

from __future__ import annotations

import logging
from typing import Sequence

from .constants import BB, BK, BN, BP, BQ, BR, WB, WK, WN, WP, WQ, WR
from .errors import InvariantError, RangeError
from .geometry import split_square
from .movegen import bishop_reach, king_reach, knight_reach, rook_reach

logger = logging.getLogger(__name__)

Board = Sequence[int]

# Enemy occupant codes seen from each side: pawn, knight, bishop, rook, queen, king.
_ENEMIES = {
    True: (BP, BN, BB, BR, BQ, BK),
    False: (WP, WN, WB, WR, WQ, WK),
}


def is_square_attacked(board: Board, color: bool, square: int) -> bool:
    """Return True if ``square`` is attacked by the side opposing ``color``.

    Rays are cast from ``square`` as if a ``color`` piece stood there, so
    ``color``'s own pieces block them and the first enemy piece on each ray
    is the only candidate attacker.

    Raises:
        RangeError: If ``square`` is not 0..63.
    """
    if not 0 <= square < 64:
        raise RangeError(f"Square index must be between 0 and 63, got {square}")
    pawn, knight, bishop, rook, queen, king = _ENEMIES[color]
    file_idx, _ = split_square(square)

    if color:
        if square >= 8:
            if file_idx != 0 and board[square - 9] == pawn:
                return True
            if file_idx != 7 and board[square - 7] == pawn:
                return True
    elif square < 56:
        if file_idx != 0 and board[square + 7] == pawn:
            return True
        if file_idx != 7 and board[square + 9] == pawn:
            return True

    for target in rook_reach(board, square, color):
        if board[target] in (rook, queen):
            return True
    for target in bishop_reach(board, square, color):
        if board[target] in (bishop, queen):
            return True
    for target in knight_reach(board, square, color):
        if board[target] == knight:
            return True
    for target in king_reach(board, square, color):
        if board[target] == king:
            return True
    return False


def find_king(board: Board, color: bool) -> int:
    wanted = WK if color else BK
    for square, code in enumerate(board):
        if code == wanted:
            return square
    logger.error("No %s king on board", "white" if color else "black")
    raise InvariantError(f"No {'white' if color else 'black'} king on board")


def is_in_check(board: Board, color: bool) -> bool:
    return is_square_attacked(board, color, find_king(board, color))
