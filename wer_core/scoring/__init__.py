"""Error-rate scoring built on top of the word alignment."""
from .batch import batch_combined, batch_per_line, split_lines, summarize_results
from .metrics import compute_metrics, compute_wer, count_operations, error_rates

__all__ = [
    "batch_combined",
    "batch_per_line",
    "split_lines",
    "summarize_results",
    "compute_metrics",
    "compute_wer",
    "count_operations",
    "error_rates",
]
