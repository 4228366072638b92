"""Square index arithmetic shared by every generator.

Squares are 0..63, row-major from a8 (0) to h1 (63). ``file`` is the column
(0 = a) and ``row`` the board row counted from the top (0 = rank 8).
"""

from __future__ import annotations


def split_square(square: int) -> tuple[int, int]:
    row, file_idx = divmod(square, 8)
    return file_idx, row


def square_at(file_idx: int, row: int) -> int:
    return row * 8 + file_idx


def is_on_corner(square: int) -> bool:
    return square in (0, 7, 56, 63)


def is_on_edge(square: int) -> bool:
    file_idx, row = split_square(square)
    return row in (0, 7) or file_idx in (0, 7)


def same_line_or_diagonal(a: int, b: int) -> bool:
    ax, ay = split_square(a)
    bx, by = split_square(b)
    return ax == bx or ay == by or abs(bx - ax) == abs(by - ay)


def shares_edge_line(a: int, b: int) -> bool:
    """True when both squares lie on the same border file or border rank."""
    ax, ay = split_square(a)
    bx, by = split_square(b)
    if ax == bx and ax in (0, 7):
        return True
    return ay == by and ay in (0, 7)
