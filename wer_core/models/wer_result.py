"""Result records produced by the alignment and scoring pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .alignment_token import AlignmentToken

CostMatrix = List[List[int]]


@dataclass(frozen=True)
class AlignmentOutcome:
    """Cost matrix plus the alignment path recovered from it."""
    matrix: CostMatrix
    alignment: List[AlignmentToken]

    @property
    def distance(self) -> int:
        return self.matrix[-1][-1]


@dataclass(frozen=True)
class WERResult:
    """Word-level error metrics for one reference/hypothesis pair.

    The rate fields are capped at 1.0. Use ``raw_wer`` or the counts when an
    uncapped figure is needed.

    Attributes:
        wer: Word Error Rate, (S + D + I) / N
        mer: Match Error Rate, (S + D + I) / (S + D + I + H)
        wil: Word Information Lost, (S + D) / N
        hits: Reference words transcribed correctly (H)
        substitutions: Reference words replaced by another word (S)
        deletions: Reference words missing from the hypothesis (D)
        insertions: Hypothesis words with no reference counterpart (I)
        total_words: Reference length N (H + S + D)
        alignment: Token-by-token alignment in reading order
    """
    wer: float
    mer: float
    wil: float
    hits: int
    substitutions: int
    deletions: int
    insertions: int
    total_words: int
    alignment: Tuple[AlignmentToken, ...]

    @property
    def errors(self) -> int:
        return self.substitutions + self.deletions + self.insertions

    @property
    def hypothesis_words(self) -> int:
        return self.hits + self.substitutions + self.insertions

    @property
    def raw_wer(self) -> float:
        return self.errors / self.total_words

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wer": self.wer,
            "mer": self.mer,
            "wil": self.wil,
            "raw_wer": self.raw_wer,
            "hits": self.hits,
            "substitutions": self.substitutions,
            "deletions": self.deletions,
            "insertions": self.insertions,
            "total_words": self.total_words,
            "alignment": [token.to_dict() for token in self.alignment],
        }
