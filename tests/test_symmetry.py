import random

import pytest

from chesscore.codec import format_board, parse_board
from chesscore.constants import EMPTY, START_PLACEMENT
from chesscore.errors import RangeError
from chesscore.symmetry import (
    Symmetry,
    all_symmetries,
    apply_symmetry,
    canonical_board,
    mirror_both,
    mirror_horizontally,
    mirror_vertically,
    rotate_clockwise,
)

SAMPLE = parse_board("8/8/8/4rk2/3Q4/3K4/8/8")


def _random_board(seed: int) -> tuple[int, ...]:
    rng = random.Random(seed)
    return tuple(rng.choice([EMPTY] * 6 + list(range(1, 13))) for _ in range(64))


def test_primitive_transforms() -> None:
    assert format_board(mirror_vertically(SAMPLE)) == "8/8/8/2kr4/4Q3/4K3/8/8"
    assert format_board(mirror_horizontally(SAMPLE)) == "8/8/3K4/3Q4/4rk2/8/8/8"
    assert format_board(mirror_both(SAMPLE)) == "8/8/4K3/4Q3/2kr4/8/8/8"
    assert format_board(rotate_clockwise(SAMPLE)) == "8/8/8/2KQ4/4r3/4k3/8/8"


def test_rotation_moves_a8_to_h8() -> None:
    board = [EMPTY] * 64
    board[0] = 11
    assert rotate_clockwise(board)[7] == 11


@pytest.mark.parametrize("seed", range(10))
def test_group_closure(seed: int) -> None:
    board = _random_board(seed)

    assert mirror_both(mirror_both(board)) == board
    assert mirror_vertically(mirror_vertically(board)) == board
    assert mirror_horizontally(mirror_horizontally(board)) == board

    rotated = board
    for _ in range(4):
        rotated = rotate_clockwise(rotated)
    assert rotated == board


def test_composite_symmetries_rotate_first() -> None:
    assert apply_symmetry(Symmetry.IDENTITY, SAMPLE) == SAMPLE
    assert apply_symmetry(Symmetry.BOTH, SAMPLE) == mirror_both(SAMPLE)
    assert apply_symmetry(Symmetry.TURN_IDENTITY, SAMPLE) == rotate_clockwise(SAMPLE)
    assert apply_symmetry(5, SAMPLE) == mirror_vertically(rotate_clockwise(SAMPLE))
    assert apply_symmetry(6, SAMPLE) == mirror_horizontally(rotate_clockwise(SAMPLE))
    assert apply_symmetry(7, SAMPLE) == mirror_both(rotate_clockwise(SAMPLE))


def test_transforms_keep_piece_counts() -> None:
    board = parse_board(START_PLACEMENT)
    for image in all_symmetries(board):
        assert sorted(image) == sorted(board)


@pytest.mark.parametrize("index", [-1, 8])
def test_apply_symmetry_range(index: int) -> None:
    with pytest.raises(RangeError):
        apply_symmetry(index, SAMPLE)


def test_canonical_board_is_shared_by_all_images() -> None:
    canonical = canonical_board(SAMPLE)
    assert len(all_symmetries(SAMPLE)) == 8
    for image in all_symmetries(SAMPLE):
        assert canonical_board(image) == canonical
