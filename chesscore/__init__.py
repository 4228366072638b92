"""Chess position codec and legal move generation."""

from .attacks import find_king, is_in_check, is_square_attacked
from .board import Position
from .codec import coordinate_to_square, format_board, parse_board, render_board, square_to_coordinate
from .constants import BLACK, NO_SQUARE, START_FEN, START_PLACEMENT, WHITE
from .errors import ChessCoreError, FormatError, InvariantError, PreconditionError, RangeError
from .legal import legal_moves, legal_moves_by_origin, legal_moves_for
from .symmetry import (
    Symmetry,
    all_symmetries,
    apply_symmetry,
    canonical_board,
    mirror_both,
    mirror_horizontally,
    mirror_vertically,
    rotate_clockwise,
)

__all__ = [
    "BLACK",
    "ChessCoreError",
    "FormatError",
    "InvariantError",
    "NO_SQUARE",
    "Position",
    "PreconditionError",
    "RangeError",
    "START_FEN",
    "START_PLACEMENT",
    "Symmetry",
    "WHITE",
    "all_symmetries",
    "apply_symmetry",
    "canonical_board",
    "coordinate_to_square",
    "find_king",
    "format_board",
    "is_in_check",
    "is_square_attacked",
    "legal_moves",
    "legal_moves_by_origin",
    "legal_moves_for",
    "mirror_both",
    "mirror_horizontally",
    "mirror_vertically",
    "parse_board",
    "render_board",
    "rotate_clockwise",
    "square_to_coordinate",
]
