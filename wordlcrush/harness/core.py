"""
Batch harness primitives.

- run_case:  solve one secret and return a result record.
- run_batch: solve many secrets in order, optionally with a progress bar.

An aborted session becomes a failed record (success=False, error set) so one
bad secret does not stop a batch; the abort is logged as a warning.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from tqdm import tqdm

from wordlcrush.engine import Oracle
from wordlcrush.solver import Solver, SolverAbortError

log = logging.getLogger(__name__)


def run_case(solver: Solver, secret: str) -> Dict:
    """
    Solve one secret.

    Returns:
        dict with keys:
            secret (str), success (bool), guesses (int), trace (list[str]),
            time_ms (float), error (str | None)
    """
    oracle = Oracle(secret)
    t0 = time.perf_counter_ns()
    try:
        trace = solver.solve(oracle)
        success, error = True, None
    except SolverAbortError as e:
        log.warning("aborted on %s: %s", secret, e)
        trace, success, error = e.trace, False, str(e)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "secret": secret,
        "success": success,
        "guesses": len(trace),
        "trace": trace,
        "time_ms": dt,
        "error": error,
    }


def run_batch(solver: Solver, secrets: Iterable[str], *, progress: bool = False) -> List[Dict]:
    """Run `run_case` for every secret, in order."""
    secrets = list(secrets)
    iterator = tqdm(secrets, ncols=80, desc="Solving", unit="word") if progress else secrets
    return [run_case(solver, s) for s in iterator]
