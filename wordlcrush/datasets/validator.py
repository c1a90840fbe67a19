"""
Word-list validator.

Checks a pair of lists before a run:
  - possible: words that may be the secret (initial candidate set)
  - allowed:  words that may be played as guesses

The solver only converges when every secret can appear among its candidates,
so the important check is possible ⊆ allowed. Also reported: valid counts,
invalid and duplicate lines, SHA-256 of the raw files.

Typical use:
    from wordlcrush.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/wordle-answers.txt", "data/wordle-allowed-guesses.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import clean_words, read_lines


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # valid words after cleaning and dedupe
    sha256: str          # empty string if missing
    duplicates: int
    invalid_lines: int


@dataclass
class ValidationReport:
    possible: FileReport
    allowed: FileReport
    possible_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _empty(path: Path) -> FileReport:
    return FileReport(str(path), path.exists(), 0, "", 0, 0)


def _inspect(path: Path):
    lines = read_lines(path)
    words, invalid = clean_words(lines)
    non_blank = sum(1 for ln in lines if ln.strip())
    duplicates = non_blank - invalid - len(words)
    rep = FileReport(str(path), True, len(words), _sha256_file(path), duplicates, invalid)
    return words, rep


def validate_wordlists(possible_path: str, allowed_path: str) -> Dict:
    """
    Validate the possible/allowed word lists.

    Returns a JSON-serializable dict (ValidationReport schema). `passed` is
    strict: both lists non-empty, no invalid lines, possible ⊆ allowed.
    Duplicates are reported but do not fail validation since loading drops
    them.
    """
    issues: List[str] = []
    pos_p = Path(possible_path)
    all_p = Path(allowed_path)

    missing = [(name, p) for name, p in (("possible", pos_p), ("allowed", all_p)) if not p.exists()]
    if missing:
        for name, p in missing:
            issues.append(f"{name} file not found: {p}")
        rep = ValidationReport(_empty(pos_p), _empty(all_p), False, False, issues)
        return asdict(rep)

    possible, pos_rep = _inspect(pos_p)
    allowed, all_rep = _inspect(all_p)

    allowed_set = set(allowed)
    outside = [w for w in possible if w not in allowed_set]
    subset_ok = not outside
    if not subset_ok:
        issues.append(f"possible not subset of allowed (e.g., {outside[:5]})")

    for name, r in (("possible", pos_rep), ("allowed", all_rep)):
        if r.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if r.invalid_lines:
            issues.append(f"{name} has {r.invalid_lines} invalid line(s)")
        if r.duplicates:
            issues.append(f"{name} has {r.duplicates} duplicate line(s)")

    passed = (
        subset_ok
        and pos_rep.invalid_lines == 0
        and all_rep.invalid_lines == 0
        and pos_rep.count > 0
        and all_rep.count > 0
    )
    return asdict(ValidationReport(pos_rep, all_rep, subset_ok, passed, issues))


def pretty_summary(report: Dict) -> str:
    """
    One-liner for the console, e.g.
        possible=2315 (sha=abc123...) | allowed=12972 (sha=def456...) | possible⊆allowed=True | OK
    """
    a = report["possible"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"possible={a['count']} (sha={(a.get('sha256') or '')[:12]}) "
        f"| allowed={b['count']} (sha={(b.get('sha256') or '')[:12]}) "
        f"| possible⊆allowed={report['possible_subset_allowed']} | {status}"
    )
