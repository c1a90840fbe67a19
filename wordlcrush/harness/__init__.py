from .core import run_case, run_batch
from .report import summarize, format_histogram
from .io import write_csv

__all__ = ["run_case", "run_batch", "summarize", "format_histogram", "write_csv"]
