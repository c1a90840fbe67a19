"""
Oracle: holds the secret and answers guesses with a Feedback.

Algorithm (two-pass, required for duplicate letters):
  1) Green pass marks every exact positional match and reserves that secret
     position.
  2) Yellow pass scans, for every non-green guess letter, the secret left to
     right; the first unreserved position holding the same letter turns the
     guess letter yellow and is reserved in turn.

A letter therefore never receives more non-gray marks than it has copies in
the secret.
"""

from __future__ import annotations

from typing import List

from .feedback import WORD_LENGTH, Feedback, Mark


def compare(guess: str, secret: str) -> Feedback:
    """
    Feedback for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret) == 5

    Examples:
      str(compare("speed", "erase")) -> "Y YY "
      str(compare("crane", "crane")) -> "GGGGG"
    """
    assert len(guess) == WORD_LENGTH, f"guess must be {WORD_LENGTH} letters: {guess!r}"
    assert len(secret) == WORD_LENGTH, f"secret must be {WORD_LENGTH} letters: {secret!r}"

    marks: List[Mark] = [Mark.ABSENT] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            marks[i] = Mark.CORRECT_POSITION
            used[i] = True

    for i in range(WORD_LENGTH):
        if marks[i] is Mark.CORRECT_POSITION:
            continue
        for j in range(WORD_LENGTH):
            if not used[j] and secret[j] == guess[i]:
                marks[i] = Mark.PRESENT_ELSEWHERE
                used[j] = True
                break

    return Feedback(tuple(marks))


class Oracle:
    """Answers guesses against one fixed secret."""

    def __init__(self, secret: str):
        assert len(secret) == WORD_LENGTH, f"secret must be {WORD_LENGTH} letters: {secret!r}"
        self.secret = secret
        self.queries = 0

    def guess(self, word: str) -> Feedback:
        self.queries += 1
        return compare(word, self.secret)

    def __repr__(self) -> str:
        return f"Oracle(queries={self.queries})"
