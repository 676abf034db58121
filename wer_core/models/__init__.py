"""Data models shared by the alignment and scoring modules."""
from .alignment_token import AlignmentToken, TokenType
from .wer_result import AlignmentOutcome, CostMatrix, WERResult

__all__ = ["AlignmentToken", "TokenType", "AlignmentOutcome", "CostMatrix", "WERResult"]
