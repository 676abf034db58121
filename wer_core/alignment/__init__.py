"""Alignment utilities for matching reference text to a hypothesis transcript."""
from .aligner import align, check_alignment_size
from .backtrack import backtrace
from .edit_distance import build_cost_matrix
from .normalizer import normalize_text
from .tokenizer import tokenize

__all__ = [
    "align",
    "check_alignment_size",
    "backtrace",
    "build_cost_matrix",
    "normalize_text",
    "tokenize",
]
