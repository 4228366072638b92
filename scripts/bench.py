#!/usr/bin/env python3
"""Time legal move generation for both colours and write a CSV."""

from __future__ import annotations

import argparse
import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chesscore.codec import parse_board
from chesscore.constants import BLACK, START_PLACEMENT, WHITE
from chesscore.legal import legal_moves

logger = logging.getLogger("chesscore.bench")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

FIELDNAMES = ["position", "mode", "iterations", "white_moves", "black_moves", "elapsed_ms", "ns_per_step"]


@dataclass(frozen=True)
class PositionCase:
    name: str
    placement: str


CASES = [
    PositionCase("start", START_PLACEMENT),
    PositionCase("queen_center", "rnb1kbnr/ppp1pppp/8/1B1q4/8/8/PPPP1PPP/RNBQK1NR"),
    PositionCase("bishop_pin", "rnbqkbnr/ppp1pppp/8/3P4/B7/5P2/PPPP2PP/RNBQK1NR"),
    PositionCase("pawn_endgame", "8/8/3pk3/3P4/2K5/8/8/8"),
]


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_bench(cases: list[PositionCase], iterations: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for case in cases:
        board = parse_board(case.placement)
        for strict_king in (False, True):
            mode = "strict" if strict_king else "compatible"
            start = perf_counter()
            for _ in range(iterations):
                white = legal_moves(board, WHITE, strict_king=strict_king)
                black = legal_moves(board, BLACK, strict_king=strict_king)
            elapsed_ms = (perf_counter() - start) * 1000.0
            rows.append(
                {
                    "position": case.name,
                    "mode": mode,
                    "iterations": iterations,
                    "white_moves": len(white),
                    "black_moves": len(black),
                    "elapsed_ms": round(elapsed_ms, 3),
                    "ns_per_step": int(elapsed_ms * 1_000_000 / iterations),
                }
            )
            logger.info("%s/%s: %d ns/step", case.name, mode, rows[-1]["ns_per_step"])
    return rows


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark legal move generation")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument("--iterations", type=int, default=2000, help="Iterations per position and mode")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    if args.iterations < 1:
        raise SystemExit("--iterations must be >= 1")

    rows = run_bench(CASES, args.iterations)
    path = Path(args.metrics_dir) / "movegen_metrics.csv"
    _write_csv(path, FIELDNAMES, rows)
    print(f"wrote {path}")


if __name__ == "__main__":
    main()
