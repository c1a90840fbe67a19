"""WordlCrush: a minimax solver for five-letter word-guessing games."""

__version__ = "0.1.0"
