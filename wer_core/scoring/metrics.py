"""Word Error Rate, Match Error Rate and Word Information Lost."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from ..alignment.aligner import align
from ..alignment.tokenizer import tokenize
from ..errors import AlignmentError, EmptyReferenceError, InvalidInputError
from ..models import AlignmentToken, TokenType, WERResult

logger = logging.getLogger(__name__)

_COUNT_KEYS = {
    TokenType.CORRECT: "hits",
    TokenType.SUBSTITUTION: "substitutions",
    TokenType.DELETION: "deletions",
    TokenType.INSERTION: "insertions",
}


def count_operations(alignment: Iterable[AlignmentToken]) -> Dict[str, int]:
    """Count hits, substitutions, deletions and insertions in an alignment."""
    counts = {"hits": 0, "substitutions": 0, "deletions": 0, "insertions": 0}
    for token in alignment:
        counts[_COUNT_KEYS[token.type]] += 1
    return counts


def error_rates(
    hits: int, substitutions: int, deletions: int, insertions: int
) -> Dict[str, float]:
    """Return capped wer/mer/wil for the given counts.

    Insertions can push the raw WER above 1.0; every rate is clamped to 1.0.
    The reference length is hits + substitutions + deletions and must be > 0.
    """
    total_words = hits + substitutions + deletions
    if total_words == 0:
        raise EmptyReferenceError()
    errors = substitutions + deletions + insertions
    return {
        "wer": min(1.0, errors / total_words),
        "mer": min(1.0, errors / (errors + hits)),
        "wil": min(1.0, (substitutions + deletions) / total_words),
    }


def compute_metrics(alignment: Iterable[AlignmentToken], total_words: int) -> WERResult:
    """Aggregate an alignment into a WERResult.

    Args:
        alignment: Alignment tokens in reading order
        total_words: Number of reference words the alignment was built from

    Returns:
        WERResult with counts, capped rates and the alignment itself

    Raises:
        EmptyReferenceError: total_words is 0
        AlignmentError: the alignment does not cover exactly total_words
            reference words
    """
    if total_words == 0:
        raise EmptyReferenceError()

    tokens = tuple(alignment)
    counts = count_operations(tokens)
    covered = counts["hits"] + counts["substitutions"] + counts["deletions"]
    if covered != total_words:
        raise AlignmentError(
            f"Alignment covers {covered} reference words, expected {total_words}"
        )

    rates = error_rates(**counts)
    return WERResult(
        wer=rates["wer"],
        mer=rates["mer"],
        wil=rates["wil"],
        total_words=total_words,
        alignment=tokens,
        **counts,
    )


def compute_wer(
    reference_text: str, hypothesis_text: str, max_cells: Optional[int] = None
) -> WERResult:
    """Tokenize, align and score a reference/hypothesis pair.

    Args:
        reference_text: Ground-truth text
        hypothesis_text: Transcript being evaluated
        max_cells: Optional alignment size limit (see ``check_alignment_size``)

    Returns:
        WERResult for the pair

    Raises:
        InvalidInputError: either argument is not a string
        EmptyReferenceError: the reference has no words
        InputTooLargeError: the pair exceeds the alignment size limit
    """
    for name, value in (("reference_text", reference_text), ("hypothesis_text", hypothesis_text)):
        if not isinstance(value, str):
            raise InvalidInputError(f"{name} must be str, got {type(value).__name__}")

    ref_words = tokenize(reference_text)
    if not ref_words:
        raise EmptyReferenceError()
    hyp_words = tokenize(hypothesis_text)

    outcome = align(ref_words, hyp_words, max_cells=max_cells)
    result = compute_metrics(outcome.alignment, len(ref_words))
    logger.debug(
        "WER %.4f (H=%d S=%d D=%d I=%d N=%d)",
        result.wer, result.hits, result.substitutions,
        result.deletions, result.insertions, result.total_words,
    )
    return result
