"""Word-level alignment and transcription error-rate engine."""
from .alignment import align, normalize_text, tokenize
from .errors import (
    AlignmentError,
    EmptyReferenceError,
    InputTooLargeError,
    InvalidInputError,
    WERError,
)
from .models import AlignmentOutcome, AlignmentToken, TokenType, WERResult
from .scoring import batch_combined, batch_per_line, compute_metrics, compute_wer

__all__ = [
    "align",
    "normalize_text",
    "tokenize",
    "compute_metrics",
    "compute_wer",
    "batch_per_line",
    "batch_combined",
    "AlignmentOutcome",
    "AlignmentToken",
    "TokenType",
    "WERResult",
    "WERError",
    "EmptyReferenceError",
    "InvalidInputError",
    "InputTooLargeError",
    "AlignmentError",
]
