"""Word tokenization for alignment."""
from __future__ import annotations

from typing import List

from .normalizer import normalize_text


def tokenize(text: str) -> List[str]:
    """Split text into normalized words.

    Example: "  The cat\\tSAT " -> ["the", "cat", "sat"]

    Args:
        text: The text to tokenize

    Returns:
        List of words; empty for empty or whitespace-only text
    """
    return [word for word in normalize_text(text).split(" ") if word]
