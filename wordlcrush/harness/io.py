"""
CSV export of batch results, one row per game.

Schema (columns):
  secret, success, guesses, time_ms, error, guess_1, ..., guess_<max_turns>

Traces longer than `max_turns` are truncated in the guess columns; the
`guesses` column keeps the true count.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv

from wordlcrush.solver import MAX_ATTEMPTS

# Longest possible trace: MAX_ATTEMPTS wrong guesses plus the aborting one.
DEFAULT_TURN_COLUMNS = MAX_ATTEMPTS + 1


def write_csv(results: List[Dict], path: str, max_turns: int = DEFAULT_TURN_COLUMNS) -> str:
    """Serialize results to CSV and return the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["secret", "success", "guesses", "time_ms", "error"]
    fields += [f"guess_{i}" for i in range(1, max_turns + 1)]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "secret": r["secret"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
            }
            trace = r.get("trace", [])
            for i in range(1, max_turns + 1):
                row[f"guess_{i}"] = trace[i - 1] if i <= len(trace) else ""
            w.writerow(row)

    return str(p)
