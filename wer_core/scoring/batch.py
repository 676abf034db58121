"""Batch scoring across multiple reference/hypothesis lines."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..errors import EmptyReferenceError, InvalidInputError
from ..models import WERResult
from .metrics import compute_wer, error_rates

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split raw text into lines, keeping blank lines so indices stay aligned."""
    return text.splitlines()


def _check_lines(name: str, lines: Sequence[str]) -> None:
    for idx, line in enumerate(lines):
        if not isinstance(line, str):
            raise InvalidInputError(
                f"{name}[{idx}] must be str, got {type(line).__name__}"
            )


def batch_per_line(
    ref_lines: Sequence[str],
    hyp_lines: Sequence[str],
    max_cells: Optional[int] = None,
) -> List[WERResult]:
    """Score each reference line against the hypothesis line at the same index.

    Lines past the end of the shorter list are dropped without error.

    Raises:
        EmptyReferenceError: a paired reference line has no words; the
            error's ``line_index`` points at it
    """
    paired = min(len(ref_lines), len(hyp_lines))
    dropped = max(len(ref_lines), len(hyp_lines)) - paired
    if dropped:
        logger.debug("Per-line batch: %d unpaired line(s) dropped", dropped)

    results: List[WERResult] = []
    for idx in range(paired):
        try:
            results.append(compute_wer(ref_lines[idx], hyp_lines[idx], max_cells=max_cells))
        except EmptyReferenceError as exc:
            raise EmptyReferenceError(line_index=idx) from exc
    return results


def batch_combined(
    ref_lines: Sequence[str],
    hyp_lines: Sequence[str],
    max_cells: Optional[int] = None,
) -> WERResult:
    """Join every line on each side with a space and score the result once."""
    _check_lines("ref_lines", ref_lines)
    _check_lines("hyp_lines", hyp_lines)
    return compute_wer(" ".join(ref_lines), " ".join(hyp_lines), max_cells=max_cells)


def summarize_results(results: Sequence[WERResult]) -> Dict[str, Any]:
    """Corpus-level totals for a per-line batch.

    Rates are recomputed from the summed counts (micro average), not averaged
    across lines.
    """
    if not results:
        raise EmptyReferenceError("No lines to summarize")

    totals = {
        "hits": sum(r.hits for r in results),
        "substitutions": sum(r.substitutions for r in results),
        "deletions": sum(r.deletions for r in results),
        "insertions": sum(r.insertions for r in results),
    }
    summary: Dict[str, Any] = {"lines": len(results)}
    summary.update(error_rates(**totals))
    summary.update(totals)
    summary["total_words"] = sum(r.total_words for r in results)
    return summary
