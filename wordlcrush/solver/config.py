from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Candidate sets smaller than this are never searched exhaustively.
MIN_SEARCH_SIZE = 3

DEFAULT_MAX_SEARCH = 100


@dataclass(frozen=True)
class SolverConfig:
    """
    Everything a Solver needs, fixed for its lifetime.

    allowed    : words that may be played as guesses
    possible   : words that may be the secret (initial candidate set)
    max_search : largest candidate set still scored exhaustively
    verbose    : log every reduction of the candidate set
    hard_mode  : every guess must be consistent with all feedback so far
    workers    : processes used to score guesses (1 = in-process)
    """
    allowed: Tuple[str, ...]
    possible: Tuple[str, ...]
    max_search: int = DEFAULT_MAX_SEARCH
    verbose: bool = False
    hard_mode: bool = False
    workers: int = 1

    def __post_init__(self):
        # Accept any iterable of words but store immutable tuples.
        object.__setattr__(self, "allowed", tuple(self.allowed))
        object.__setattr__(self, "possible", tuple(self.possible))
        if self.max_search < 0:
            raise ValueError(f"max_search must be >= 0; got {self.max_search}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
