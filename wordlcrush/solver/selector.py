"""
Minimax guess selection.

Main idea:
  - For each allowed guess g, every still-possible secret p yields a feedback
    compare(g, p), and that feedback would leave reduce_set(g, fb, candidates)
    alive. worst(g) is the largest of those sets.
  - Play the g with the smallest worst(g). Ties go to the earliest g in
    `allowed`, so the choice never depends on how the work was split.

Shortcut:
  - Fewer than MIN_SEARCH_SIZE candidates, or more than the size threshold:
    play the first candidate without scoring anything.

Acceleration:
  - Secrets giving the same feedback leave the same set, so set sizes are
    memoized per feedback while scoring one guess.
  - A guess stops being scored once its running worst case reaches the best
    score found so far (it can no longer win the tie-break).
  - With workers > 1, `allowed` is cut into contiguous chunks scored in a
    process pool; each chunk reports its own (score, index, word) and the
    minimum is taken afterwards.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import Executor, ProcessPoolExecutor
from typing import Dict, List, Optional, Sequence, Tuple

from wordlcrush.engine import Feedback, compare, reduce_set
from .config import MIN_SEARCH_SIZE

log = logging.getLogger(__name__)

# Chunks handed to each worker; more chunks balance uneven guess costs.
CHUNKS_PER_WORKER = 4

# (worst-case size, index in allowed, word)
Scored = Tuple[int, int, str]


def worst_case_size(guess: str, candidates: Sequence[str], bound: Optional[int] = None) -> int:
    """
    Largest candidate set that can remain after playing `guess`.

    If `bound` is given, scoring stops as soon as the running maximum reaches
    it and that partial maximum (>= bound) is returned.
    """
    sizes: Dict[Feedback, int] = {}
    worst = 0
    for secret in candidates:
        fb = compare(guess, secret)
        size = sizes.get(fb)
        if size is None:
            size = len(reduce_set(guess, fb, candidates))
            sizes[fb] = size
        if size > worst:
            worst = size
            if bound is not None and worst >= bound:
                break
    return worst


def _best_in_chunk(chunk: Sequence[str], offset: int, candidates: Sequence[str]) -> Scored:
    """Sequential minimax over one slice of `allowed` starting at `offset`."""
    best: Scored = (len(candidates) + 1, -1, "")
    for i, guess in enumerate(chunk):
        score = worst_case_size(guess, candidates, bound=best[0])
        if score < best[0]:
            best = (score, offset + i, guess)
    return best


def _score_chunk(task: Tuple[List[str], int, List[str]]) -> Scored:
    # Single-argument wrapper so it can go through Executor.map.
    chunk, offset, candidates = task
    return _best_in_chunk(chunk, offset, candidates)


def _split(allowed: Sequence[str], n_chunks: int) -> List[Tuple[int, List[str]]]:
    size = max(1, math.ceil(len(allowed) / n_chunks))
    return [(start, list(allowed[start:start + size])) for start in range(0, len(allowed), size)]


def _merge(results) -> Scored:
    """Pick the lowest score, earliest index wins on ties."""
    return min(results, key=lambda r: (r[0], r[1]))


def score_parallel(allowed: Sequence[str], candidates: Sequence[str], workers: int,
                   executor: Optional[Executor] = None) -> Scored:
    """
    Minimax over `allowed` split across a process pool.

    Uses `executor` if one is supplied (the solver keeps one per session),
    otherwise opens a pool of `workers` processes for this call only.
    """
    n_chunks = min(len(allowed), workers * CHUNKS_PER_WORKER)
    cands = list(candidates)
    tasks = [(chunk, offset, cands) for offset, chunk in _split(allowed, n_chunks)]
    log.debug("scoring %d guesses in %d chunks over %d workers", len(allowed), len(tasks), workers)
    if executor is not None:
        return _merge(executor.map(_score_chunk, tasks))
    with ProcessPoolExecutor(max_workers=workers) as pool:
        return _merge(pool.map(_score_chunk, tasks))


def calculate_guess(allowed: Sequence[str], candidates: Sequence[str], size_threshold: int,
                    workers: int = 1, executor: Optional[Executor] = None) -> str:
    """
    Choose the next guess.

    Args:
      allowed        : guess dictionary, scanned in order
      candidates     : words still consistent with all feedback
      size_threshold : largest candidate set scored exhaustively
      workers        : process count for scoring (1 = sequential, in-process)
      executor       : optional pool to reuse across calls

    Raises:
      ValueError if `candidates` is empty, or `allowed` is empty when a
      search is needed. Both mean the solver was misconfigured.
    """
    if not candidates:
        raise ValueError("no candidates left: the secret is not in the possible-solutions list")

    n = len(candidates)
    if n < MIN_SEARCH_SIZE or n > size_threshold:
        log.debug("shortcut: %d candidates, playing first candidate %s", n, candidates[0])
        return candidates[0]

    if not allowed:
        raise ValueError("allowed guess list is empty")

    if workers > 1 and len(allowed) > 1:
        score, index, word = score_parallel(allowed, candidates, workers, executor)
    else:
        score, index, word = _best_in_chunk(allowed, 0, candidates)

    if index < 0:
        # Unreachable: every worst case is at most len(candidates).
        raise RuntimeError("minimax search did not pick a word")

    log.debug("minimax over %d guesses: %s (#%d) leaves at most %d of %d", len(allowed), word, index, score, n)
    return word
