"""
Summaries of a batch: guess-count histogram, mean, median, failures.
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate run_batch results. Statistics cover solved games only; the
    histogram maps guess count -> number of solved games.
    """
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    failed = [r["secret"] for r in results if not r["success"]]

    if solved.size == 0:
        return {
            "games": len(results), "solved": 0, "failed": len(failed), "failed_secrets": failed,
            "mean": None, "median": None, "max": None, "histogram": {},
        }

    counts = np.bincount(solved)
    histogram = {int(k): int(c) for k, c in enumerate(counts) if c > 0}
    return {
        "games": len(results),
        "solved": int(solved.size),
        "failed": len(failed),
        "failed_secrets": failed,
        "mean": float(solved.mean()),
        "median": float(np.median(solved)),
        "max": int(solved.max()),
        "histogram": histogram,
    }


def format_histogram(histogram: Dict[int, int], width: int = 50) -> str:
    """
    Text bars, one line per guess count:
        3 |##########           412
    """
    if not histogram:
        return ""
    peak = max(histogram.values())
    lines = []
    for k in sorted(histogram):
        c = histogram[k]
        bar = "#" * max(1, round(width * c / peak))
        lines.append(f"{k:>2} |{bar:<{width}} {c}")
    return "\n".join(lines)


def pretty_summary(summary: Dict) -> str:
    if summary["solved"] == 0:
        return f"games={summary['games']} | solved=0 | failed={summary['failed']}"
    return (
        f"games={summary['games']} | solved={summary['solved']} | failed={summary['failed']} "
        f"| mean={summary['mean']:.4f} | median={summary['median']:g} | max={summary['max']}"
    )
