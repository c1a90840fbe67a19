"""
Solve loop: guess, read feedback, shrink the candidate set, repeat.

A session ends SOLVED when the oracle answers all green, or ABORTED with
SolverAbortError once more than MAX_ATTEMPTS wrong guesses have been made.
An abort means the word lists and the secret do not belong together (or a
bug); it is never an expected outcome.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from contextlib import ExitStack
from typing import List, Optional

from wordlcrush.engine import Feedback, Oracle, reduce_set
from .config import SolverConfig
from .selector import calculate_guess

log = logging.getLogger(__name__)

# Wrong guesses tolerated before a session is declared hopeless.
MAX_ATTEMPTS = 12

# Above this many survivors the verbose trace only reports a count.
_LIST_SURVIVORS_BELOW = 10


class SolverAbortError(RuntimeError):
    """The solve loop ran past MAX_ATTEMPTS; `trace` holds the guesses made."""

    def __init__(self, message: str, trace: List[str]):
        super().__init__(message)
        self.trace = list(trace)


class Solver:
    def __init__(self, config: SolverConfig):
        self.config = config
        log.info(
            "Solver created with %d length to begin exhaustive search, verbose = %s, hard = %s, workers = %d",
            config.max_search, config.verbose, config.hard_mode, config.workers,
        )

    def _trace_reduction(self, guess: str, feedback: Feedback, before: int, after: List[str]) -> None:
        if not self.config.verbose:
            return
        if len(after) < _LIST_SURVIVORS_BELOW:
            remaining = "{" + ", ".join(after) + "}"
        else:
            remaining = f"{len(after)} entries"
        log.info("Guessed %s, got '%s', reduced set from %d entries to %s", guess, feedback, before, remaining)

    def solve(self, oracle: Oracle) -> List[str]:
        """
        Play until the oracle answers all green.

        Returns:
          the ordered list of guesses, the last one being the secret.

        Raises:
          SolverAbortError after more than MAX_ATTEMPTS wrong guesses.
          ValueError if the word lists run dry (misconfiguration).
        """
        cfg = self.config
        candidates: List[str] = list(cfg.possible)
        # In hard mode the guess pool shrinks with the same feedback.
        pool: List[str] = list(cfg.allowed)
        trace: List[str] = []
        attempts = 0

        with ExitStack() as stack:
            executor: Optional[ProcessPoolExecutor] = None
            if cfg.workers > 1:
                executor = stack.enter_context(ProcessPoolExecutor(max_workers=cfg.workers))

            while True:
                guess = calculate_guess(pool, candidates, cfg.max_search, cfg.workers, executor)
                trace.append(guess)
                feedback = oracle.guess(guess)
                if feedback.all_correct():
                    log.debug("solved in %d guesses: %s", len(trace), " ".join(trace))
                    return trace

                before = len(candidates)
                candidates = reduce_set(guess, feedback, candidates)
                self._trace_reduction(guess, feedback, before, candidates)
                if cfg.hard_mode:
                    pool = reduce_set(guess, feedback, pool)
                    if not pool:
                        # Nothing in the guess list fits any more; candidates always do.
                        log.debug("hard-mode pool exhausted, guessing from %d candidates", len(candidates))
                        pool = list(candidates)

                attempts += 1
                if attempts > MAX_ATTEMPTS:
                    raise SolverAbortError(
                        f"no solution after {len(trace)} guesses ({' '.join(trace)})", trace)
