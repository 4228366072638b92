"""Pseudo-legal destination generators, one per piece kind.

Every generator returns destinations in a fixed order so that the legal move
list built on top of them is reproducible. None of them look at whether the
mover's king is left in check.

The public per-piece generators expect the origin to hold a piece and raise
``PreconditionError`` otherwise. The ``*_reach`` shapes skip that check so
the attack detector can cast them from empty squares.
"""

from __future__ import annotations

from typing import Sequence

from .constants import (
    BISHOP,
    EMPTY,
    KING,
    KNIGHT,
    NO_SQUARE,
    PAWN,
    QUEEN,
    ROOK,
    piece_color,
    piece_kind,
)
from .errors import PreconditionError
from .geometry import split_square

Board = Sequence[int]

# (index delta, min file, max file, min row, max row) for each knight jump.
KNIGHT_JUMPS = (
    (-17, 1, 7, 2, 7),
    (-15, 0, 6, 2, 7),
    (-10, 2, 7, 1, 7),
    (-6, 0, 5, 1, 7),
    (6, 2, 7, 0, 6),
    (10, 0, 5, 0, 6),
    (15, 1, 7, 0, 5),
    (17, 0, 6, 0, 5),
)

KING_STEPS = (
    (-9, 1, 7, 1, 7),
    (-8, 0, 7, 1, 7),
    (-7, 0, 6, 1, 7),
    (-1, 1, 7, 0, 7),
    (1, 0, 6, 0, 7),
    (7, 1, 7, 0, 6),
    (8, 0, 7, 0, 6),
    (9, 0, 6, 0, 6),
)


def _check_origin(board: Board, square: int, en_passant: int = NO_SQUARE) -> None:
    if not 0 <= square < 64:
        raise PreconditionError(f"Origin square out of range: {square}")
    if board[square] == EMPTY:
        raise PreconditionError(f"Empty square has no movement: {square}")
    if not NO_SQUARE <= en_passant < 64:
        raise PreconditionError(f"En passant target out of range: {en_passant}")


def _is_enemy(code: int, color: bool) -> bool:
    return code != EMPTY and piece_color(code) != color


def _can_land(code: int, color: bool) -> bool:
    return code == EMPTY or piece_color(code) != color


def _white_pawn(board: Board, square: int, en_passant: int) -> list[int]:
    moves: list[int] = []
    if square < 8:
        return moves
    file_idx, _ = split_square(square)
    if 48 <= square <= 55 and board[square - 8] == EMPTY and board[square - 16] == EMPTY:
        moves.append(square - 16)
    if file_idx != 0 and (square - 9 == en_passant or _is_enemy(board[square - 9], True)):
        moves.append(square - 9)
    if board[square - 8] == EMPTY:
        moves.append(square - 8)
    if file_idx != 7 and (square - 7 == en_passant or _is_enemy(board[square - 7], True)):
        moves.append(square - 7)
    return moves


def _black_pawn(board: Board, square: int, en_passant: int) -> list[int]:
    moves: list[int] = []
    if square >= 56:
        return moves
    file_idx, _ = split_square(square)
    if file_idx != 0 and (square + 7 == en_passant or _is_enemy(board[square + 7], False)):
        moves.append(square + 7)
    if board[square + 8] == EMPTY:
        moves.append(square + 8)
    if file_idx != 7 and (square + 9 == en_passant or _is_enemy(board[square + 9], False)):
        moves.append(square + 9)
    if 8 <= square <= 15 and board[square + 8] == EMPTY and board[square + 16] == EMPTY:
        moves.append(square + 16)
    return moves


def white_pawn_moves(board: Board, square: int) -> list[int]:
    _check_origin(board, square)
    return _white_pawn(board, square, NO_SQUARE)


def white_pawn_moves_en_passant(board: Board, square: int, en_passant: int) -> list[int]:
    _check_origin(board, square, en_passant)
    return _white_pawn(board, square, en_passant)


def black_pawn_moves(board: Board, square: int) -> list[int]:
    _check_origin(board, square)
    return _black_pawn(board, square, NO_SQUARE)


def black_pawn_moves_en_passant(board: Board, square: int, en_passant: int) -> list[int]:
    _check_origin(board, square, en_passant)
    return _black_pawn(board, square, en_passant)


def _step_moves(board: Board, square: int, color: bool, steps: tuple) -> list[int]:
    file_idx, row = split_square(square)
    moves: list[int] = []
    for delta, min_file, max_file, min_row, max_row in steps:
        if min_file <= file_idx <= max_file and min_row <= row <= max_row:
            target = square + delta
            if _can_land(board[target], color):
                moves.append(target)
    return moves


def _cast(board: Board, square: int, color: bool, delta: int, length: int, moves: list[int]) -> None:
    target = square
    for _ in range(length):
        target += delta
        code = board[target]
        if code == EMPTY:
            moves.append(target)
            continue
        if piece_color(code) != color:
            moves.append(target)
        break


def _diagonal_rays(board: Board, square: int, color: bool, moves: list[int]) -> None:
    file_idx, row = split_square(square)
    _cast(board, square, color, -7, min(7 - file_idx, row), moves)  # up-right
    _cast(board, square, color, 9, min(7 - file_idx, 7 - row), moves)  # down-right
    _cast(board, square, color, 7, min(file_idx, 7 - row), moves)  # down-left
    _cast(board, square, color, -9, min(file_idx, row), moves)  # up-left


def _orthogonal_tail(board: Board, square: int, color: bool, moves: list[int]) -> None:
    # Everything collected before right and down is reversed.
    file_idx, row = split_square(square)
    _cast(board, square, color, -1, file_idx, moves)
    _cast(board, square, color, -8, row, moves)
    moves.reverse()
    _cast(board, square, color, 1, 7 - file_idx, moves)
    _cast(board, square, color, 8, 7 - row, moves)


def knight_reach(board: Board, square: int, color: bool) -> list[int]:
    return _step_moves(board, square, color, KNIGHT_JUMPS)


def king_reach(board: Board, square: int, color: bool) -> list[int]:
    return _step_moves(board, square, color, KING_STEPS)


def bishop_reach(board: Board, square: int, color: bool) -> list[int]:
    moves: list[int] = []
    _diagonal_rays(board, square, color, moves)
    return moves


def rook_reach(board: Board, square: int, color: bool) -> list[int]:
    moves: list[int] = []
    _orthogonal_tail(board, square, color, moves)
    return moves


def queen_reach(board: Board, square: int, color: bool) -> list[int]:
    moves: list[int] = []
    _diagonal_rays(board, square, color, moves)
    _orthogonal_tail(board, square, color, moves)
    return moves


def knight_moves(board: Board, square: int, color: bool) -> list[int]:
    _check_origin(board, square)
    return knight_reach(board, square, color)


def king_moves(board: Board, square: int, color: bool) -> list[int]:
    """Adjacent destinations only; castling is never produced."""
    _check_origin(board, square)
    return king_reach(board, square, color)


def bishop_moves(board: Board, square: int, color: bool) -> list[int]:
    _check_origin(board, square)
    return bishop_reach(board, square, color)


def rook_moves(board: Board, square: int, color: bool) -> list[int]:
    """Rook destinations in ascending square order."""
    _check_origin(board, square)
    return rook_reach(board, square, color)


def queen_moves(board: Board, square: int, color: bool) -> list[int]:
    _check_origin(board, square)
    return queen_reach(board, square, color)


_REACH = {
    KNIGHT: knight_reach,
    BISHOP: bishop_reach,
    ROOK: rook_reach,
    QUEEN: queen_reach,
    KING: king_reach,
}


def piece_moves(board: Board, square: int, en_passant: int, color: bool) -> list[int]:
    """Dispatch to the generator matching the occupant on ``square``.

    Pawns take the en passant variant when a target is given.

    Raises:
        PreconditionError: If ``square`` is off the board or empty, or
            ``en_passant`` is neither -1 nor a square.
    """
    _check_origin(board, square, en_passant)
    code = board[square]
    kind = piece_kind(code)
    if kind == PAWN:
        if piece_color(code):
            return _white_pawn(board, square, en_passant)
        return _black_pawn(board, square, en_passant)
    if kind not in _REACH:
        raise PreconditionError(f"Unknown occupant code {code!r} on square {square}")
    return _REACH[kind](board, square, color)
