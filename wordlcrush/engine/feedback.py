"""
Feedback vector returned by the oracle for one guess.

Conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = letter present elsewhere in the secret
  - ' '  : gray   = letter absent (or present fewer times than guessed)

A Feedback always holds exactly WORD_LENGTH marks and is immutable, so it can
key a dict when grouping candidates by the pattern they would produce.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

WORD_LENGTH = 5


class Mark(Enum):
    ABSENT = " "
    PRESENT_ELSEWHERE = "Y"
    CORRECT_POSITION = "G"


# Characters accepted by Feedback.parse for a gray square.
_ABSENT_ALIASES = {" ", "-", "."}


@dataclass(frozen=True)
class Feedback:
    marks: Tuple[Mark, ...]

    def __post_init__(self):
        marks = tuple(self.marks)
        assert len(marks) == WORD_LENGTH, f"feedback must have {WORD_LENGTH} marks, got {len(marks)}"
        assert all(isinstance(m, Mark) for m in marks), f"feedback marks must be Mark values: {marks!r}"
        object.__setattr__(self, "marks", marks)

    @classmethod
    def parse(cls, text: str) -> "Feedback":
        """
        Inverse of str(): "Y YY " -> Feedback. Absent may also be written as
        '-' or '.' so patterns survive editors that strip trailing spaces.
        """
        text = text.upper()
        if len(text) != WORD_LENGTH:
            raise ValueError(f"feedback string must be {WORD_LENGTH} characters: {text!r}")
        marks = []
        for ch in text:
            if ch in _ABSENT_ALIASES:
                marks.append(Mark.ABSENT)
            elif ch == "Y":
                marks.append(Mark.PRESENT_ELSEWHERE)
            elif ch == "G":
                marks.append(Mark.CORRECT_POSITION)
            else:
                raise ValueError(f"unknown feedback character {ch!r} in {text!r}")
        return cls(tuple(marks))

    def mark(self, i: int) -> Mark:
        return self.marks[i]

    def is_correct(self, i: int) -> bool:
        return self.marks[i] is Mark.CORRECT_POSITION

    def is_present(self, i: int) -> bool:
        return self.marks[i] is Mark.PRESENT_ELSEWHERE

    def is_absent(self, i: int) -> bool:
        return self.marks[i] is Mark.ABSENT

    def all_correct(self) -> bool:
        return all(m is Mark.CORRECT_POSITION for m in self.marks)

    def __len__(self) -> int:
        return len(self.marks)

    def __iter__(self):
        return iter(self.marks)

    def __str__(self) -> str:
        return "".join(m.value for m in self.marks)
