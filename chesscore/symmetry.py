"""Board rotations and mirrors for canonicalising or augmenting positions."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Sequence

from .codec import format_board
from .constants import EMPTY
from .errors import RangeError
from .geometry import split_square, square_at

Board = Sequence[int]


class Symmetry(IntEnum):
    IDENTITY = 0
    VERTICAL = 1
    HORIZONTAL = 2
    BOTH = 3
    TURN_IDENTITY = 4
    TURN_VERTICAL = 5
    TURN_HORIZONTAL = 6
    TURN_BOTH = 7


def _relocate(board: Board, target: Callable[[int, int], tuple[int, int]]) -> tuple[int, ...]:
    result = [EMPTY] * 64
    for square, code in enumerate(board):
        if code == EMPTY:
            continue
        new_x, new_y = target(*split_square(square))
        result[square_at(new_x, new_y)] = code
    return tuple(result)


def rotate_clockwise(board: Board) -> tuple[int, ...]:
    return _relocate(board, lambda x, y: (7 - y, x))


def mirror_vertically(board: Board) -> tuple[int, ...]:
    """Swap files a and h (reflection across the vertical axis)."""
    return _relocate(board, lambda x, y: (7 - x, y))


def mirror_horizontally(board: Board) -> tuple[int, ...]:
    """Swap ranks 1 and 8 (reflection across the horizontal axis)."""
    return _relocate(board, lambda x, y: (x, 7 - y))


def mirror_both(board: Board) -> tuple[int, ...]:
    return _relocate(board, lambda x, y: (7 - x, 7 - y))


_PRIMITIVES = {
    Symmetry.IDENTITY: tuple,
    Symmetry.VERTICAL: mirror_vertically,
    Symmetry.HORIZONTAL: mirror_horizontally,
    Symmetry.BOTH: mirror_both,
}


def apply_symmetry(symmetry: int, board: Board) -> tuple[int, ...]:
    """Apply one of the eight symmetries.

    Members 4..7 rotate the board clockwise, then apply member ``index - 4``.

    Raises:
        RangeError: If ``symmetry`` is not 0..7.
    """
    try:
        symmetry = Symmetry(symmetry)
    except ValueError as exc:
        raise RangeError(f"Symmetry index must be between 0 and 7, got {symmetry}") from exc
    if symmetry in _PRIMITIVES:
        return _PRIMITIVES[symmetry](board)
    return apply_symmetry(symmetry - 4, rotate_clockwise(board))


def all_symmetries(board: Board) -> list[tuple[int, ...]]:
    return [apply_symmetry(symmetry, board) for symmetry in Symmetry]


def canonical_board(board: Board) -> tuple[int, ...]:
    """Image of ``board`` whose placement string sorts first among all eight."""
    return min(all_symmetries(board), key=format_board)
