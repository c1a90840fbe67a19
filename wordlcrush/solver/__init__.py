from .config import SolverConfig, MIN_SEARCH_SIZE, DEFAULT_MAX_SEARCH
from .selector import calculate_guess, worst_case_size
from .core import Solver, SolverAbortError, MAX_ATTEMPTS

__all__ = [
    "SolverConfig", "Solver", "SolverAbortError", "calculate_guess", "worst_case_size",
    "MIN_SEARCH_SIZE", "DEFAULT_MAX_SEARCH", "MAX_ATTEMPTS",
]
