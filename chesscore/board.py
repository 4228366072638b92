"""Immutable position value with full FEN I/O."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .codec import coordinate_to_square, format_board, parse_board, render_board, square_to_coordinate
from .constants import NO_SQUARE, START_FEN
from .errors import FormatError
from .legal import legal_moves_for

CASTLING_ORDER = "KQkq"


@dataclass(frozen=True, slots=True)
class Position:
    """Board plus side to move, castling rights, en passant and counters.

    Fields are stored as given. Nothing checks that the en passant target or
    the castling rights are consistent with the board.
    """

    board: tuple[int, ...]
    white_to_move: bool = True
    # white kingside, white queenside, black kingside, black queenside
    castling: tuple[bool, bool, bool, bool] = (False, False, False, False)
    en_passant: int = NO_SQUARE
    halfmove_clock: int = 0
    fullmove_number: int = 1

    @classmethod
    def startpos(cls) -> "Position":
        return cls.from_fen(START_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> "Position":
        """Parse a full six-field FEN, or a bare placement field.

        A bare placement gives white to move, no castling rights, no en
        passant target and counters 0 and 1.

        Raises:
            FormatError: If any field is malformed.
        """
        if not fen or not isinstance(fen, str):
            raise FormatError("FEN must be a non-empty string")
        fields = fen.split()
        if len(fields) == 1:
            return cls(board=parse_board(fields[0]))
        if len(fields) != 6:
            raise FormatError(f"FEN must have 6 fields, got {len(fields)}")

        placement, side, castling, ep, halfmove, fullmove = fields
        board = parse_board(placement)

        if side not in ("w", "b"):
            raise FormatError(f"Invalid side to move in FEN: {side}")

        if castling != "-" and (
            any(ch not in CASTLING_ORDER for ch in castling) or len(set(castling)) != len(castling)
        ):
            raise FormatError(f"Invalid castling rights in FEN: {castling}")
        rights = tuple(ch in castling for ch in CASTLING_ORDER)

        if ep == "-":
            en_passant = NO_SQUARE
        else:
            try:
                en_passant = coordinate_to_square(ep)
            except FormatError as exc:
                raise FormatError(f"Invalid en passant square in FEN: {ep}") from exc

        try:
            halfmove_clock = int(halfmove)
            fullmove_number = int(fullmove)
        except ValueError as exc:
            raise FormatError(f"Invalid move counters in FEN: {halfmove} {fullmove}") from exc
        if halfmove_clock < 0 or fullmove_number < 1:
            raise FormatError(f"Invalid move counters in FEN: {halfmove} {fullmove}")

        return cls(
            board=board,
            white_to_move=side == "w",
            castling=rights,
            en_passant=en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )

    def to_fen(self) -> str:
        side = "w" if self.white_to_move else "b"
        castling = "".join(ch for ch, allowed in zip(CASTLING_ORDER, self.castling) if allowed) or "-"
        ep = "-" if self.en_passant == NO_SQUARE else square_to_coordinate(self.en_passant)
        return f"{self.placement()} {side} {castling} {ep} {self.halfmove_clock} {self.fullmove_number}"

    def placement(self) -> str:
        return format_board(self.board)

    def replace(self, **changes) -> "Position":
        return dataclasses.replace(self, **changes)

    def legal_moves(self, *, strict_king: bool = False) -> list[tuple[int, int]]:
        return legal_moves_for(self, strict_king=strict_king)

    def __str__(self) -> str:
        side = "w" if self.white_to_move else "b"
        ep = "-" if self.en_passant == NO_SQUARE else square_to_coordinate(self.en_passant)
        return render_board(self.board) + f"\nside={side} ep={ep}"
