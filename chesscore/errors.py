"""Error kinds raised by the core."""

from __future__ import annotations


class ChessCoreError(Exception):
    """Base class for every error raised by chesscore."""


class FormatError(ChessCoreError, ValueError):
    """Malformed textual input (placement field, FEN, coordinate)."""


class RangeError(ChessCoreError, ValueError):
    """Square index outside its valid domain."""


class PreconditionError(ChessCoreError):
    """A generator was called in a way its contract forbids."""


class InvariantError(ChessCoreError):
    """The board is structurally impossible, e.g. the mover has no king."""
