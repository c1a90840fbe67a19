"""
Candidate filtering given one (guess, feedback) pair.

Given:
  - the guess that was played
  - the feedback it received (real, or hypothetical while scoring guesses)
  - a candidate word

Decide whether the candidate could still be the secret. The same pure check
serves both the real candidate set and speculative scoring, so the two can
never disagree.

Rules (all must hold):
  1) Position: green letters must match; yellow and gray letters must not
     sit at the position where they were guessed.
  2) Count: a letter with n green/yellow marks needs at least n copies in the
     candidate, exactly n if the same letter also drew a gray mark.
  3) Absence: a letter that only drew gray marks must not appear at all.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List

from .feedback import WORD_LENGTH, Feedback, Mark


def is_feasible(guess: str, feedback: Feedback, candidate: str) -> bool:
    """
    Return True if `candidate` is consistent with `guess` having produced
    `feedback`.

    An all-green feedback only admits the guess itself; there is no
    shortcut for it.
    """
    assert len(guess) == WORD_LENGTH, f"guess must be {WORD_LENGTH} letters: {guess!r}"
    assert len(candidate) == WORD_LENGTH, f"candidate must be {WORD_LENGTH} letters: {candidate!r}"

    # Pass 1: positional facts.
    for i in range(WORD_LENGTH):
        g = guess[i]
        if feedback.mark(i) is Mark.CORRECT_POSITION:
            if candidate[i] != g:
                return False
        elif candidate[i] == g:
            # yellow or gray letter sitting where it was already tried
            return False

    # Pass 2: letter counts revealed by the marks.
    confirmed: Counter = Counter()  # n(c): green + yellow marks per letter
    capped = set()                  # letters with at least one gray mark
    for g, m in zip(guess, feedback.marks):
        if m is Mark.ABSENT:
            capped.add(g)
        else:
            confirmed[g] += 1

    have = Counter(candidate)

    for letter, n in confirmed.items():
        if letter in capped:
            if have[letter] != n:
                return False
        elif have[letter] < n:
            return False

    # Pass 3: letters that are simply not in the secret.
    for letter in capped:
        if letter not in confirmed and have[letter] > 0:
            return False

    return True


def reduce_set(guess: str, feedback: Feedback, candidates: Iterable[str]) -> List[str]:
    """
    Keep only candidates still feasible after `guess` produced `feedback`.

    Returns:
      List[str] of survivors (order preserved as in `candidates`).
    """
    return [w for w in candidates if is_feasible(guess, feedback, w)]
