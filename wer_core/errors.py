"""Error taxonomy for the alignment and scoring engine."""
from __future__ import annotations

from typing import Optional


class WERError(Exception):
    """Base class for every error raised by ``wer_core``."""


class EmptyReferenceError(WERError):
    """The reference text has no words after tokenization.

    Error rates are undefined (not zero) for an empty reference, so this is
    raised before any alignment work starts.
    """

    def __init__(self, message: str = "Reference is empty after normalization",
                 line_index: Optional[int] = None) -> None:
        if line_index is not None:
            message = f"{message} (line {line_index + 1})"
        super().__init__(message)
        self.line_index = line_index


class InvalidInputError(WERError, TypeError):
    """A non-text value was passed where a string was expected."""


class InputTooLargeError(WERError):
    """The reference/hypothesis pair exceeds the configured alignment size."""

    def __init__(self, cells: int, limit: int) -> None:
        super().__init__(
            f"Alignment would need {cells} matrix cells, limit is {limit}"
        )
        self.cells = cells
        self.limit = limit


class AlignmentError(WERError):
    """Cost matrix and alignment path disagree."""
