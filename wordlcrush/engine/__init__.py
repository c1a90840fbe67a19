from .feedback import WORD_LENGTH, Feedback, Mark
from .oracle import Oracle, compare
from .constraints import is_feasible, reduce_set

__all__ = ["WORD_LENGTH", "Feedback", "Mark", "Oracle", "compare", "is_feasible", "reduce_set"]
