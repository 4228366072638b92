"""Translation between placement text, coordinates and the 64-slot board."""

from __future__ import annotations

from typing import Sequence

from .constants import EMPTY, FILES, OCCUPANT_SYMBOLS, RANKS, SYMBOL_TO_OCCUPANT
from .errors import FormatError, RangeError
from .geometry import split_square, square_at

MIN_PLACEMENT_LENGTH = 15
MAX_PLACEMENT_LENGTH = 71

PLACEMENT_CHARS = frozenset("/12345678") | frozenset(SYMBOL_TO_OCCUPANT)


def parse_board(text: str) -> tuple[int, ...]:
    """Decode a FEN piece-placement field into a 64-tuple of occupant codes.

    Raises:
        FormatError: If the text has an implausible length, an unknown
            character, a delimiter count other than 7, or a rank that does
            not cover exactly 8 squares.
    """
    if not isinstance(text, str):
        raise FormatError(f"Placement must be a string, got {type(text).__name__}")
    if len(text) > MAX_PLACEMENT_LENGTH:
        raise FormatError(f"Placement too long: {len(text)} characters")
    if len(text) < MIN_PLACEMENT_LENGTH:
        raise FormatError(f"Placement too short: {len(text)} characters")

    for ch in text:
        if ch not in PLACEMENT_CHARS:
            raise FormatError(f"Invalid character in placement: {ch!r}")

    ranks = text.split("/")
    if len(ranks) != 8:
        raise FormatError(f"Placement must have 7 '/' delimiters, found {len(ranks) - 1}")

    board: list[int] = []
    for rank in ranks:
        count = 0
        for ch in rank:
            if ch.isdigit():
                run = int(ch)
                count += run
                board.extend([EMPTY] * run)
            else:
                count += 1
                board.append(SYMBOL_TO_OCCUPANT[ch])
        if count != 8:
            raise FormatError(f"Rank does not sum to 8 squares: {rank!r}")
    return tuple(board)


def format_board(board: Sequence[int]) -> str:
    """Encode a board as a canonical placement field."""
    if len(board) != 64:
        raise FormatError(f"Board must have 64 squares, got {len(board)}")

    rows: list[str] = []
    for row_start in range(0, 64, 8):
        run = 0
        parts: list[str] = []
        for code in board[row_start:row_start + 8]:
            if code not in OCCUPANT_SYMBOLS:
                raise FormatError(f"Unknown occupant code: {code!r}")
            if code == EMPTY:
                run += 1
                continue
            if run:
                parts.append(str(run))
                run = 0
            parts.append(OCCUPANT_SYMBOLS[code])
        if run:
            parts.append(str(run))
        rows.append("".join(parts))
    return "/".join(rows)


def square_to_coordinate(square: int) -> str:
    if not 0 <= square < 64:
        raise RangeError(f"Square index must be between 0 and 63, got {square}")
    file_idx, row = split_square(square)
    return FILES[file_idx] + RANKS[row]


def coordinate_to_square(text: str) -> int:
    if not isinstance(text, str) or len(text) != 2:
        raise FormatError(f"Coordinate must be 2 characters, got {text!r}")
    file_char, rank_char = text
    if file_char not in FILES or rank_char not in RANKS:
        raise FormatError(f"Invalid coordinate: {text!r}")
    return square_at(FILES.index(file_char), RANKS.index(rank_char))


def render_board(board: Sequence[int]) -> str:
    lines = []
    for row_start in range(0, 64, 8):
        cells = []
        for code in board[row_start:row_start + 8]:
            cells.append("." if code == EMPTY else OCCUPANT_SYMBOLS[code])
        lines.append(" ".join(cells))
    return "\n".join(lines)
