# apps/cli/run.py
"""
CLI entry point for WordlCrush.

This script:
  1) Validates the word lists (prints counts + SHA, checks possible ⊆ allowed).
  2) Loads the lists and builds a Solver from the flags.
  3) Solves one --secret, or every possible word (or a --sample of them),
     then prints a summary line and a guess-count histogram, and optionally
     writes a per-game CSV.

Exit status: 0 all solved, 1 some game aborted, 2 bad input.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from wordlcrush.datasets import load_words, pretty_summary, validate_wordlists
from wordlcrush.harness import format_histogram, run_batch, run_case, summarize, write_csv
from wordlcrush.harness.report import pretty_summary as pretty_results
from wordlcrush.solver import DEFAULT_MAX_SEARCH, Solver, SolverConfig

log = logging.getLogger("wordlcrush")


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="WordlCrush: minimax word-game solver")
    ap.add_argument("--allowed", "--file", dest="allowed", default="data/wordle-allowed-guesses.txt",
                    help="path to allowed guesses (one word per line)")
    ap.add_argument("--possible", default="data/wordle-answers.txt",
                    help="path to possible solutions (should be a subset of allowed)")
    ap.add_argument("--max-search", type=int, default=DEFAULT_MAX_SEARCH,
                    help="largest candidate set scored exhaustively")
    ap.add_argument("--hard", action="store_true", help="hard mode: guesses must fit all feedback")
    ap.add_argument("--workers", type=int, default=1, help="processes used to score guesses")
    ap.add_argument("--verbose", "-v", action="store_true", help="trace every reduction")
    ap.add_argument("--strict", action="store_true", help="refuse to run if validation fails")
    group = ap.add_mutually_exclusive_group()
    group.add_argument("--secret", help="solve only this word")
    group.add_argument("--sample", type=int, help="solve only K possible words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--csv", help="write per-game results to this CSV path")
    ap.add_argument("--progress", action="store_true", help="show a progress bar")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate word lists
    rep = validate_wordlists(args.possible, args.allowed)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning(issue)
    if args.strict and not rep["passed"]:
        print("Validation failed: fix the word lists before running.", file=sys.stderr)
        return 2

    # 2) Load lists and build the solver
    try:
        allowed = load_words(args.allowed)
        possible = load_words(args.possible)
    except FileNotFoundError as e:
        print(f"Cannot load {e}", file=sys.stderr)
        return 2
    log.info("Loaded %d allowed and %d possible words", len(allowed), len(possible))

    try:
        config = SolverConfig(
            allowed=allowed,
            possible=possible,
            max_search=args.max_search,
            verbose=args.verbose,
            hard_mode=args.hard,
            workers=args.workers,
        )
    except ValueError as e:
        print(f"Bad configuration: {e}", file=sys.stderr)
        return 2
    solver = Solver(config)

    # 3) Single secret
    if args.secret:
        secret = args.secret.strip().lower()
        if secret not in set(possible):
            print(f"{secret!r} is not in the possible-solutions list", file=sys.stderr)
            return 2
        r = run_case(solver, secret)
        print(" ".join(r["trace"]))
        print(f"{'Solved' if r['success'] else 'FAILED'} in {r['guesses']} guesses")
        results = [r]
    else:
        cases = list(possible)
        if args.sample and args.sample < len(cases):
            random.Random(args.seed).shuffle(cases)
            cases = cases[: args.sample]
        results = run_batch(solver, cases, progress=args.progress)
        summary = summarize(results)
        print(pretty_results(summary))
        print(format_histogram(summary["histogram"]))
        if summary["failed"]:
            print(f"Failed: {' '.join(summary['failed_secrets'])}")

    if args.csv:
        print(f"Wrote: {write_csv(results, args.csv)}")

    return 0 if all(r["success"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
