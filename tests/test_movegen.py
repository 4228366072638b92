import random

import pytest

from chesscore.codec import parse_board
from chesscore.constants import (
    BB,
    BISHOP,
    BK,
    BLACK,
    BN,
    BP,
    BQ,
    BR,
    EMPTY,
    KING,
    KNIGHT,
    PAWN,
    QUEEN,
    ROOK,
    START_PLACEMENT,
    WB,
    WHITE,
    WK,
    WN,
    WP,
    WQ,
    WR,
    piece_color,
    piece_kind,
)
from chesscore.errors import PreconditionError
from chesscore.movegen import (
    bishop_moves,
    black_pawn_moves,
    black_pawn_moves_en_passant,
    king_moves,
    knight_moves,
    piece_moves,
    queen_moves,
    rook_moves,
    white_pawn_moves,
    white_pawn_moves_en_passant,
)

START = parse_board(START_PLACEMENT)


def _lone(placement: str) -> tuple[int, ...]:
    return parse_board(placement)


def _only(code: int, square: int) -> list[int]:
    board = [EMPTY] * 64
    board[square] = code
    return board


def test_start_pawns_have_single_and_double_steps() -> None:
    assert white_pawn_moves(START, 52) == [36, 44]  # e2: e4 then e3
    assert black_pawn_moves(START, 12) == [20, 28]  # e7: e6 then e5


def test_double_step_needs_both_squares_empty() -> None:
    board = _lone("8/8/8/8/8/4n3/4P3/8")  # e3 occupied
    assert white_pawn_moves(board, 52) == []
    board = _lone("8/8/8/8/4n3/8/4P3/8")  # e4 occupied, e3 free
    assert white_pawn_moves(board, 52) == [44]


def test_black_pawn_on_start_rank_has_four_destinations() -> None:
    board = _lone("8/1p6/N1N5/8/8/8/8/8")
    assert black_pawn_moves(board, 9) == [16, 17, 18, 25]


def test_pawn_does_not_capture_own_pieces_or_wrap_files() -> None:
    board = _lone("8/8/8/8/7p/1P6/P7/8")  # a2 pawn, b3 own pawn, h4 enemy pawn
    assert white_pawn_moves(board, 48) == [32, 40]


def test_white_en_passant_capture() -> None:
    board = _lone("8/8/8/3pP3/8/8/8/8")
    assert white_pawn_moves(board, 28) == [20]
    assert white_pawn_moves_en_passant(board, 28, 19) == [19, 20]


def test_black_en_passant_capture() -> None:
    board = _lone("8/8/8/8/3pP3/8/8/8")
    assert black_pawn_moves(board, 35) == [43]
    assert black_pawn_moves_en_passant(board, 35, 44) == [43, 44]


def test_en_passant_target_does_not_wrap_around_the_board() -> None:
    board = _lone("8/8/8/P7/8/8/8/8")  # a5; a5 - 9 is h7
    assert white_pawn_moves_en_passant(board, 24, 15) == [16]


def test_pawn_on_last_row_has_no_moves() -> None:
    board = [EMPTY] * 64
    board[3] = WP
    board[59] = BP
    assert white_pawn_moves(board, 3) == []
    assert black_pawn_moves(board, 59) == []


def test_knight_moves_in_corner_and_center() -> None:
    assert knight_moves(_only(WN, 0), 0, WHITE) == [10, 17]
    assert knight_moves(_only(WN, 35), 35, WHITE) == [18, 20, 25, 29, 41, 45, 50, 52]
    assert knight_moves(_only(BN, 63), 63, BLACK) == [46, 53]


def test_knight_skips_own_pieces() -> None:
    assert knight_moves(START, 57, WHITE) == [40, 42]
    assert knight_moves(START, 62, WHITE) == [45, 47]


def test_rook_moves_are_ascending() -> None:
    assert rook_moves(_only(WR, 35), 35, WHITE) == [3, 11, 19, 27, 32, 33, 34, 36, 37, 38, 39, 43, 51, 59]


def test_rook_stops_on_capture_and_before_own_piece() -> None:
    board = _lone("8/8/8/8/p7/8/8/R5N1")  # a1 rook, a4 enemy pawn, g1 own knight
    assert rook_moves(board, 56, WHITE) == [32, 40, 48, 57, 58, 59, 60, 61]


def test_bishop_ray_order() -> None:
    assert bishop_moves(_only(WB, 35), 35, WHITE) == [28, 21, 14, 7, 44, 53, 62, 42, 49, 56, 26, 17, 8]
    assert bishop_moves(START, 58, WHITE) == []


def test_queen_ray_order() -> None:
    assert queen_moves(_only(WQ, 35), 35, WHITE) == [
        3, 11, 19, 27, 32, 33, 34, 8, 17, 26, 56, 49, 42, 62, 53, 44, 7, 14, 21, 28,
        36, 37, 38, 39, 43, 51, 59,
    ]


def test_queen_is_rook_plus_bishop() -> None:
    board = parse_board("r1bqkbnr/ppp1pppp/2n5/1B1p4/4P3/P7/1PPP1PPP/RNBQK1NR")
    for square in (3, 59):
        color = square > 32
        assert sorted(queen_moves(board, square, color)) == sorted(
            rook_moves(board, square, color) + bishop_moves(board, square, color)
        )


def test_king_moves() -> None:
    assert king_moves(_only(WK, 60), 60, WHITE) == [51, 52, 53, 59, 61]
    assert king_moves(_only(BK, 0), 0, BLACK) == [1, 8, 9]
    assert king_moves(_only(WK, 35), 35, WHITE) == [26, 27, 28, 34, 36, 42, 43, 44]
    assert king_moves(START, 60, WHITE) == []


def test_piece_moves_dispatch() -> None:
    board = _lone("8/8/8/3pP3/8/8/8/8")
    assert piece_moves(board, 28, -1, WHITE) == [20]
    assert piece_moves(board, 28, 19, WHITE) == [19, 20]
    assert piece_moves(START, 57, -1, WHITE) == [40, 42]
    assert piece_moves(START, 60, -1, WHITE) == []


@pytest.mark.parametrize(
    ("square", "en_passant"),
    [(64, -1), (-1, -1), (30, -1), (52, 64), (52, -2)],
)
def test_piece_moves_preconditions(square: int, en_passant: int) -> None:
    with pytest.raises(PreconditionError):
        piece_moves(START, square, en_passant, WHITE)


@pytest.mark.parametrize(
    ("generator", "code"),
    [
        (knight_moves, WN),
        (bishop_moves, WB),
        (rook_moves, WR),
        (queen_moves, WQ),
        (king_moves, WK),
    ],
)
def test_piece_generators_reject_bad_origins(generator, code) -> None:
    board = _only(code, 36)
    assert generator(board, 36, WHITE)
    for square in (-1, 64, 35):
        with pytest.raises(PreconditionError):
            generator(board, square, WHITE)


@pytest.mark.parametrize(
    ("generator", "code", "square"),
    [(white_pawn_moves, WP, 52), (black_pawn_moves, BP, 12)],
)
def test_pawn_generators_reject_bad_origins(generator, code, square) -> None:
    board = _only(code, square)
    assert len(generator(board, square)) == 2
    for bad in (-1, 64, square + 1):
        with pytest.raises(PreconditionError):
            generator(board, bad)


@pytest.mark.parametrize(
    ("generator", "code", "square"),
    [(white_pawn_moves_en_passant, WP, 28), (black_pawn_moves_en_passant, BP, 35)],
)
def test_en_passant_generators_reject_bad_targets(generator, code, square) -> None:
    board = _only(code, square)
    assert generator(board, square, -1) == generator(board, square, 0)
    for en_passant in (-2, 64, 99):
        with pytest.raises(PreconditionError):
            generator(board, square, en_passant)
    with pytest.raises(PreconditionError):
        generator(board, square + 1, -1)


def _random_board(rng: random.Random) -> list[int]:
    board = [EMPTY] * 64
    for square in rng.sample(range(64), rng.randint(2, 24)):
        code = rng.choice((WP, BP, WN, BN, WB, BB, WR, BR, WQ, BQ, WK, BK))
        if code in (WP, BP) and square // 8 in (0, 7):
            continue
        board[square] = code
    return board


def _step_towards(origin: int, destination: int) -> tuple[int, int]:
    ox, oy = origin % 8, origin // 8
    dx, dy = destination % 8, destination // 8
    return (dy > oy) - (dy < oy), (dx > ox) - (dx < ox)


_SLIDERS = {WB: bishop_moves, BB: bishop_moves, WR: rook_moves, BR: rook_moves, WQ: queen_moves, BQ: queen_moves}


@pytest.mark.parametrize("seed", range(30))
def test_sliding_destinations_stay_on_open_lines(seed: int) -> None:
    board = _random_board(random.Random(seed))
    for origin, code in enumerate(board):
        if code not in _SLIDERS:
            continue
        color = piece_color(code)
        for destination in _SLIDERS[code](board, origin, color):
            row_step, file_step = _step_towards(origin, destination)
            file_gap = abs(destination % 8 - origin % 8)
            row_gap = abs(destination // 8 - origin // 8)
            assert file_gap == 0 or row_gap == 0 or file_gap == row_gap, (seed, origin, destination)
            if code in (WB, BB):
                assert file_gap == row_gap
            if code in (WR, BR):
                assert file_gap == 0 or row_gap == 0

            square = origin + 8 * row_step + file_step
            while square != destination:
                assert board[square] == EMPTY, (seed, origin, destination, square)
                square += 8 * row_step + file_step
            assert board[destination] == EMPTY or piece_color(board[destination]) != color


@pytest.mark.parametrize("seed", range(30))
def test_pawn_destination_count_bound(seed: int) -> None:
    board = _random_board(random.Random(seed))
    for square, code in enumerate(board):
        if code == WP:
            moves = white_pawn_moves(board, square)
            on_start_row = 48 <= square <= 55
        elif code == BP:
            moves = black_pawn_moves(board, square)
            on_start_row = 8 <= square <= 15
        else:
            continue
        assert len(moves) <= (4 if on_start_row else 3), (seed, square, moves)


def test_piece_kind_drives_dispatch() -> None:
    assert [piece_kind(code) for code in (WP, BN, WB, BR, WQ, BK)] == [PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING]
    with pytest.raises(PreconditionError):
        piece_kind(EMPTY)
