"""Recover one minimum-cost alignment from a filled cost matrix."""
from __future__ import annotations

from typing import List, Sequence

from ..errors import AlignmentError
from ..models import AlignmentToken, CostMatrix


def backtrace(
    ref: Sequence[str], hyp: Sequence[str], matrix: CostMatrix
) -> List[AlignmentToken]:
    """Walk the matrix from the bottom-right corner back to the origin.

    When several minimum-cost paths exist the step is chosen in a fixed
    order: match, then substitution, then insertion, then deletion. The
    order is part of the output contract, so the same inputs always give
    the same alignment.

    Args:
        ref: Reference tokens used to build ``matrix``
        hyp: Hypothesis tokens used to build ``matrix``
        matrix: Output of ``build_cost_matrix(ref, hyp)``

    Returns:
        Alignment tokens in left-to-right reading order
    """
    tokens: List[AlignmentToken] = []
    i, j = len(ref), len(hyp)

    while i > 0 and j > 0:
        cost = matrix[i][j]
        if ref[i - 1] == hyp[j - 1]:
            tokens.append(AlignmentToken.correct(ref[i - 1]))
            i -= 1
            j -= 1
        elif cost == matrix[i - 1][j - 1] + 1:
            tokens.append(AlignmentToken.substitution(ref[i - 1], hyp[j - 1]))
            i -= 1
            j -= 1
        elif cost == matrix[i][j - 1] + 1:
            tokens.append(AlignmentToken.insertion(hyp[j - 1]))
            j -= 1
        elif cost == matrix[i - 1][j] + 1:
            tokens.append(AlignmentToken.deletion(ref[i - 1]))
            i -= 1
        else:
            raise AlignmentError(f"No valid step from cell ({i}, {j})")

    while j > 0:
        tokens.append(AlignmentToken.insertion(hyp[j - 1]))
        j -= 1
    while i > 0:
        tokens.append(AlignmentToken.deletion(ref[i - 1]))
        i -= 1

    tokens.reverse()
    return tokens
