"""Occupant codes, colours and square name tables."""

from __future__ import annotations

from .errors import PreconditionError

WHITE = True
BLACK = False

NO_SQUARE = -1

# Occupant codes. Odd codes are white pieces.
EMPTY, WP, BP, WN, BN, WB, BB, WR, BR, WQ, BQ, WK, BK = range(13)

PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(6)

OCCUPANT_SYMBOLS = {
    EMPTY: "1",
    WP: "P",
    BP: "p",
    WN: "N",
    BN: "n",
    WB: "B",
    BB: "b",
    WR: "R",
    BR: "r",
    WQ: "Q",
    BQ: "q",
    WK: "K",
    BK: "k",
}

SYMBOL_TO_OCCUPANT = {v: k for k, v in OCCUPANT_SYMBOLS.items() if k != EMPTY}

START_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
START_FEN = f"{START_PLACEMENT} w KQkq - 0 1"

# Row 0 is rank 8.
FILES = "abcdefgh"
RANKS = "87654321"


def piece_kind(code: int) -> int:
    if code == EMPTY:
        raise PreconditionError("Empty square has no piece kind")
    return (code - 1) // 2


def piece_color(code: int) -> bool:
    if code == EMPTY:
        raise PreconditionError("Empty square has no color")
    return code % 2 == 1
