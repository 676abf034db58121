"""Word-level Levenshtein cost matrix."""
from __future__ import annotations

from typing import List, Sequence


def build_cost_matrix(ref: Sequence[str], hyp: Sequence[str]) -> List[List[int]]:
    """Classic edit-distance table between two word sequences.

    ``dp[i][j]`` is the minimum number of word insertions, deletions and
    substitutions that turn ``ref[:i]`` into ``hyp[:j]``. The whole table is
    kept because the backtracker walks it afterwards.

    Args:
        ref: Reference sequence (list of tokens)
        hyp: Hypothesis sequence (list of tokens)

    Returns:
        (len(ref) + 1) x (len(hyp) + 1) matrix of costs
    """
    m, n = len(ref), len(hyp)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        dp[i][0] = i
    for j in range(1, n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        ref_word = ref[i - 1]
        prev_row = dp[i - 1]
        row = dp[i]
        for j in range(1, n + 1):
            if ref_word == hyp[j - 1]:
                row[j] = prev_row[j - 1]
            else:
                row[j] = 1 + min(
                    prev_row[j],      # deletion
                    row[j - 1],       # insertion
                    prev_row[j - 1],  # substitution
                )
    return dp
