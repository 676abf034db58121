"""Text normalization applied before tokenization."""
from __future__ import annotations

import re

# \s plus U+FEFF, which Python does not treat as whitespace
_WHITESPACE_RE = re.compile(r"[\s\ufeff]+")


def normalize_text(text: str) -> str:
    """Normalize text for word alignment.

    Lowercases, trims both ends and collapses every run of whitespace
    (spaces, tabs, newlines, stray BOMs) to a single space. Punctuation is left alone:
    "Hello," and "hello" are different words.

    Args:
        text: Raw text

    Returns:
        Normalized text
    """
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()
