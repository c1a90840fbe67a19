from __future__ import annotations
from pathlib import Path
from typing import List, Tuple

from wordlcrush.engine import WORD_LENGTH


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def clean_words(lines: List[str]) -> Tuple[List[str], int]:
    """
    Normalize raw lines into game words.

    Blank lines are skipped silently; anything else that is not exactly
    WORD_LENGTH letters counts as invalid. Duplicates are dropped, keeping
    the first occurrence so list order is preserved.

    Returns:
      (words, invalid_count)
    """
    words: List[str] = []
    seen = set()
    invalid = 0
    for raw in lines:
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) != WORD_LENGTH or not w.isalpha():
            invalid += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)
    return words, invalid


def load_words(p: Path | str) -> List[str]:
    """Load a word list: lowercase, 5 letters, no blanks or duplicates."""
    words, _ = clean_words(read_lines(p))
    return words
