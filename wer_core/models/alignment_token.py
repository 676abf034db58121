"""Data model for one step of a word alignment."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TokenType(str, Enum):
    CORRECT = "correct"
    SUBSTITUTION = "substitution"
    DELETION = "deletion"
    INSERTION = "insertion"


@dataclass(frozen=True)
class AlignmentToken:
    """Represents one aligned position between reference and hypothesis.

    Attributes:
        reference: Reference word, or "" when the hypothesis has an extra word
        hypothesis: Hypothesis word, or "" when a reference word was dropped
        type: How the two sides relate (correct, substitution, deletion, insertion)
    """
    reference: str
    hypothesis: str
    type: TokenType

    @classmethod
    def correct(cls, word: str) -> "AlignmentToken":
        return cls(reference=word, hypothesis=word, type=TokenType.CORRECT)

    @classmethod
    def substitution(cls, reference: str, hypothesis: str) -> "AlignmentToken":
        return cls(reference=reference, hypothesis=hypothesis, type=TokenType.SUBSTITUTION)

    @classmethod
    def deletion(cls, reference: str) -> "AlignmentToken":
        return cls(reference=reference, hypothesis="", type=TokenType.DELETION)

    @classmethod
    def insertion(cls, hypothesis: str) -> "AlignmentToken":
        return cls(reference="", hypothesis=hypothesis, type=TokenType.INSERTION)

    def to_dict(self) -> Dict[str, str]:
        return {
            "reference": self.reference,
            "hypothesis": self.hypothesis,
            "type": self.type.value,
        }
