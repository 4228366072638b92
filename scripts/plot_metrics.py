#!/usr/bin/env python3
"""Render move generation benchmark charts from CSV metrics into SVG."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "gold": "#c6a25a",
    "red": "#7d2a2a",
    "green": "#4e7d49",
}

MODE_COLORS = {"compatible": PALETTE["gold"], "strict": PALETTE["green"]}


def _load_csv(path: Path) -> list[dict[str, str]]:
    with path.open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot move generation benchmark metrics")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Directory containing movegen_metrics.csv",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "movegen-charts.svg"),
        help="Output SVG path",
    )
    return parser.parse_args()


def plot(rows: list[dict[str, str]], output: Path) -> None:
    plt.rcParams.update(
        {
            "font.family": "DejaVu Sans",
            "axes.facecolor": PALETTE["panel"],
            "figure.facecolor": PALETTE["bg"],
            "axes.edgecolor": PALETTE["grid"],
            "axes.labelcolor": PALETTE["text"],
            "xtick.color": PALETTE["muted"],
            "ytick.color": PALETTE["muted"],
            "text.color": PALETTE["text"],
            "axes.titlecolor": PALETTE["text"],
            "grid.color": PALETTE["grid"],
        }
    )

    fig, axes = plt.subplots(1, 2, figsize=(16, 6), dpi=150)
    fig.suptitle("Legal Move Generation", fontsize=18, fontweight="bold", color=PALETTE["text"])

    positions = sorted({row["position"] for row in rows})
    timings: dict[str, dict[str, int]] = defaultdict(dict)
    move_counts: dict[str, tuple[int, int]] = {}
    for row in rows:
        timings[row["mode"]][row["position"]] = int(row["ns_per_step"])
        move_counts[row["position"]] = (int(row["white_moves"]), int(row["black_moves"]))

    # ns/step per position, one bar per mode.
    ax0 = axes[0]
    width = 0.8 / max(len(timings), 1)
    for idx, (mode, data) in enumerate(sorted(timings.items())):
        xs = [i + idx * width for i in range(len(positions))]
        ax0.bar(xs, [data.get(p, 0) for p in positions], width=width, color=MODE_COLORS.get(mode), label=mode)
    ax0.set_xticks([i + width * (len(timings) - 1) / 2 for i in range(len(positions))])
    ax0.set_xticklabels(positions)
    ax0.set_title("Nanoseconds per White+Black Generation")
    ax0.set_ylabel("ns/step")
    ax0.grid(True, axis="y", alpha=0.6)
    ax0.legend(frameon=False)

    ax1 = axes[1]
    xs = list(range(len(positions)))
    ax1.bar([x - 0.2 for x in xs], [move_counts[p][0] for p in positions], width=0.4, color=PALETTE["gold"], label="white")
    ax1.bar([x + 0.2 for x in xs], [move_counts[p][1] for p in positions], width=0.4, color=PALETTE["red"], label="black")
    ax1.set_xticks(xs)
    ax1.set_xticklabels(positions)
    ax1.set_title("Legal Moves per Side")
    ax1.set_ylabel("moves")
    ax1.grid(True, axis="y", alpha=0.6)
    ax1.legend(frameon=False)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(output, format="svg")
    plt.close(fig)


def main() -> None:
    args = parse_args()
    output = Path(args.output)

    rows = _load_csv(Path(args.metrics_dir) / "movegen_metrics.csv")
    plot(rows, output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
