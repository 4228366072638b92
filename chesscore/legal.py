"""Legal move filter built on the pseudo-move generators.

Most candidates are emitted straight from the generators. Only the moves that
could expose the king are simulated on a scratch copy of the board:

* every king move,
* every pawn move (captures change file, en passant removes a second pawn),
* moves of pieces lined up with the king, unless the piece sits on an edge
  and the line to the king leaves that edge,
* every move while the king is in check.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from .attacks import find_king, is_square_attacked
from .constants import BK, BP, EMPTY, NO_SQUARE, WK, WP, piece_color
from .errors import RangeError
from .geometry import is_on_edge, same_line_or_diagonal, shares_edge_line
from .movegen import king_moves, piece_moves

if TYPE_CHECKING:
    from .board import Position

logger = logging.getLogger(__name__)

Board = Sequence[int]
Move = tuple[int, int]


def _apply(board: Board, origin: int, destination: int, en_passant: int) -> list[int]:
    scratch = list(board)
    code = scratch[origin]
    if destination == en_passant and scratch[destination] == EMPTY:
        # En passant also removes the pawn that made the double step.
        if code == WP and destination in (origin - 9, origin - 7) and scratch[destination + 8] == BP:
            scratch[destination + 8] = EMPTY
        elif code == BP and destination in (origin + 7, origin + 9) and scratch[destination - 8] == WP:
            scratch[destination - 8] = EMPTY
    scratch[destination] = code
    scratch[origin] = EMPTY
    return scratch


def _needs_verification(board: Board, square: int, king_square: int) -> bool:
    if board[square] in (WP, BP):
        return True
    if not same_line_or_diagonal(square, king_square):
        return False
    return not is_on_edge(square) or shares_edge_line(square, king_square)


def legal_moves(
    board: Board,
    color: bool,
    en_passant_target: int = NO_SQUARE,
    *,
    strict_king: bool = False,
) -> list[Move]:
    """Return every legal ``(origin, destination)`` pair for ``color``.

    Moves are ordered by ascending origin square, then by the order of the
    piece's generator.

    King destinations are checked on the current board by default, with the
    king still standing on its origin. That square then shields the
    destination from a slider attacking along the king's own line, so a king
    stepping straight back from a rook is wrongly kept. ``strict_king=True``
    moves the king on a scratch board before testing.

    Raises:
        InvariantError: If ``color`` has no king on ``board``.
        RangeError: If ``en_passant_target`` is neither -1 nor a square.
    """
    if not NO_SQUARE <= en_passant_target < 64:
        raise RangeError(f"En passant target out of range: {en_passant_target}")
    king_square = find_king(board, color)
    in_check = is_square_attacked(board, color, king_square)

    moves: list[Move] = []
    simulated = 0
    for square, code in enumerate(board):
        if code == EMPTY or piece_color(code) != color:
            continue

        if code in (WK, BK):
            for target in king_moves(board, square, color):
                if strict_king:
                    simulated += 1
                    view = _apply(board, square, target, NO_SQUARE)
                else:
                    view = board
                if not is_square_attacked(view, color, target):
                    moves.append((square, target))
            continue

        candidates = piece_moves(board, square, en_passant_target, color)
        if in_check or _needs_verification(board, square, king_square):
            for target in candidates:
                simulated += 1
                scratch = _apply(board, square, target, en_passant_target)
                if not is_square_attacked(scratch, color, king_square):
                    moves.append((square, target))
        else:
            moves.extend((square, target) for target in candidates)

    logger.debug(
        "legal_moves color=%s moves=%d simulated=%d in_check=%s",
        "w" if color else "b",
        len(moves),
        simulated,
        in_check,
    )
    return moves


def legal_moves_for(position: "Position", *, strict_king: bool = False) -> list[Move]:
    return legal_moves(
        position.board,
        position.white_to_move,
        position.en_passant,
        strict_king=strict_king,
    )


def legal_moves_by_origin(moves: Sequence[Move]) -> dict[int, list[int]]:
    grouped: dict[int, list[int]] = {}
    for origin, destination in moves:
        grouped.setdefault(origin, []).append(destination)
    return grouped
