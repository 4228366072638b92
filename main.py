"""Command-line utilities for the move generator."""

from __future__ import annotations

import argparse
import logging
from time import perf_counter_ns

from chesscore.attacks import is_square_attacked
from chesscore.board import Position
from chesscore.codec import coordinate_to_square, format_board, render_board, square_to_coordinate
from chesscore.constants import BLACK, START_FEN, WHITE
from chesscore.errors import ChessCoreError
from chesscore.legal import legal_moves, legal_moves_by_origin, legal_moves_for
from chesscore.symmetry import Symmetry, apply_symmetry, canonical_board

logger = logging.getLogger("chesscore.cli")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess move generation utilities")
    parser.add_argument("--fen", default=START_FEN, help="Full FEN or bare placement field")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    moves_parser = subparsers.add_parser("moves", help="List legal moves for the side to move")
    moves_parser.add_argument("--strict-king", action="store_true", help="Simulate king moves before testing")
    moves_parser.add_argument("--group", action="store_true", help="Group destinations per origin square")

    attacked_parser = subparsers.add_parser("attacked", help="Test whether a square is attacked")
    attacked_parser.add_argument("square", help="Algebraic coordinate, e.g. e4")
    attacked_parser.add_argument("--color", choices=("w", "b"), default="w", help="Side defending the square")

    symmetry_parser = subparsers.add_parser("symmetry", help="Print a transformed placement")
    symmetry_parser.add_argument(
        "index",
        nargs="?",
        type=int,
        choices=range(len(Symmetry)),
        help="Symmetry index 0-7; omit to print the canonical form",
    )

    bench_parser = subparsers.add_parser("bench", help="Time legal move generation for both colours")
    bench_parser.add_argument("--iterations", type=int, default=10_000, help="Number of iterations")

    return parser


def _print_moves(position: Position, strict_king: bool, group: bool) -> None:
    moves = legal_moves_for(position, strict_king=strict_king)
    print(f"Count: {len(moves)}")
    if group:
        for origin, destinations in legal_moves_by_origin(moves).items():
            targets = " ".join(square_to_coordinate(sq) for sq in destinations)
            print(f"{square_to_coordinate(origin)}: {targets}")
        return
    print(" ".join(f"({square_to_coordinate(o)}, {square_to_coordinate(d)})" for o, d in moves))


def bench(position: Position, iterations: int) -> float:
    """Average nanoseconds per white+black legal move generation."""
    board = position.board
    start = perf_counter_ns()
    for _ in range(iterations):
        legal_moves(board, WHITE)
        legal_moves(board, BLACK)
    elapsed = perf_counter_ns() - start
    return elapsed / max(iterations, 1)


def run(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        position = Position.from_fen(args.fen)

        if args.command == "moves":
            _print_moves(position, args.strict_king, args.group)
            return 0

        if args.command == "attacked":
            square = coordinate_to_square(args.square)
            attacked = is_square_attacked(position.board, args.color == "w", square)
            print(f"{args.square}: {'attacked' if attacked else 'safe'}")
            return 0

        if args.command == "symmetry":
            if args.index is None:
                print(format_board(canonical_board(position.board)))
            else:
                print(format_board(apply_symmetry(args.index, position.board)))
            return 0

        if args.command == "bench":
            ns_per_step = bench(position, args.iterations)
            print(f"{ns_per_step:.0f}ns/step | iterations: {args.iterations}")
            return 0
    except ChessCoreError as exc:
        logger.error("%s", exc)
        return 1

    print(render_board(position.board))
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
