"""Alignment orchestration between reference and hypothesis tokens."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import get_max_alignment_cells
from ..errors import InputTooLargeError
from ..models import AlignmentOutcome
from .backtrack import backtrace
from .edit_distance import build_cost_matrix

logger = logging.getLogger(__name__)


def check_alignment_size(m: int, n: int, max_cells: Optional[int] = None) -> None:
    """Reject pairs whose cost matrix would exceed the configured size.

    Args:
        m: Reference length
        n: Hypothesis length
        max_cells: Explicit limit; falls back to ``WER_MAX_ALIGNMENT_CELLS``.
            A limit <= 0 disables the check.

    Raises:
        InputTooLargeError: if (m + 1) * (n + 1) is above the limit
    """
    limit = get_max_alignment_cells() if max_cells is None else max_cells
    if limit <= 0:
        return
    cells = (m + 1) * (n + 1)
    if cells > limit:
        raise InputTooLargeError(cells=cells, limit=limit)


def align(
    reference: Sequence[str],
    hypothesis: Sequence[str],
    max_cells: Optional[int] = None,
) -> AlignmentOutcome:
    """Align two token sequences.

    Args:
        reference: Reference tokens
        hypothesis: Hypothesis tokens
        max_cells: Optional matrix size limit (see ``check_alignment_size``)

    Returns:
        AlignmentOutcome holding the cost matrix and the alignment path
    """
    check_alignment_size(len(reference), len(hypothesis), max_cells)
    matrix = build_cost_matrix(reference, hypothesis)
    alignment = backtrace(reference, hypothesis, matrix)
    logger.debug(
        "Aligned %d reference / %d hypothesis tokens, distance=%d",
        len(reference), len(hypothesis), matrix[-1][-1],
    )
    return AlignmentOutcome(matrix=matrix, alignment=alignment)
