"""Unicode cleanup for transcripts before scoring.

Bengali and other Indic transcripts often carry invisible characters
(zero-width joiners, BOMs, non-breaking spaces) that make identical words
compare unequal. These helpers strip them and report what was removed.
"""
from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

# ZWSP, ZWNJ, ZWJ, BOM
ZERO_WIDTH_CHARS = ("\u200b", "\u200c", "\u200d", "\ufeff")
NON_BREAKING_SPACE = "\u00a0"

_ZERO_WIDTH_RE = re.compile("[" + "".join(ZERO_WIDTH_CHARS) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class NormalizationResult:
    original: str
    normalized: str
    zero_width_chars_removed: int = 0
    non_breaking_spaces_removed: int = 0
    whitespace_normalized: bool = False
    unicode_normalized: bool = False

    @property
    def changed(self) -> bool:
        return self.original != self.normalized

    @property
    def characters_removed(self) -> int:
        return len(self.original) - len(self.normalized)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original": self.original,
            "normalized": self.normalized,
            "changes": {
                "zero_width_chars_removed": self.zero_width_chars_removed,
                "non_breaking_spaces_removed": self.non_breaking_spaces_removed,
                "whitespace_normalized": self.whitespace_normalized,
                "unicode_normalized": self.unicode_normalized,
            },
            "stats": {
                "original_length": len(self.original),
                "normalized_length": len(self.normalized),
                "characters_removed": self.characters_removed,
            },
        }


@dataclass
class LinesNormalization:
    lines: List[NormalizationResult] = field(default_factory=list)

    @property
    def summary(self) -> Dict[str, int]:
        modified = sum(1 for r in self.lines if r.changed)
        return {
            "total_lines": len(self.lines),
            "modified_lines": modified,
            "unchanged_lines": len(self.lines) - modified,
            "total_zero_width_chars_removed": sum(r.zero_width_chars_removed for r in self.lines),
            "total_non_breaking_spaces_removed": sum(r.non_breaking_spaces_removed for r in self.lines),
            "total_characters_removed": sum(r.characters_removed for r in self.lines),
        }


def normalize_unicode_text(text: str) -> NormalizationResult:
    """NFC-normalize, strip zero-width characters, replace NBSP, collapse whitespace."""
    if not text:
        return NormalizationResult(original=text, normalized=text)

    nfc = unicodedata.normalize("NFC", text)
    unicode_normalized = nfc != text

    zero_width = len(_ZERO_WIDTH_RE.findall(nfc))
    cleaned = _ZERO_WIDTH_RE.sub("", nfc)

    nbsp = cleaned.count(NON_BREAKING_SPACE)
    cleaned = cleaned.replace(NON_BREAKING_SPACE, " ")

    collapsed = _WHITESPACE_RE.sub(" ", cleaned).strip()

    return NormalizationResult(
        original=text,
        normalized=collapsed,
        zero_width_chars_removed=zero_width,
        non_breaking_spaces_removed=nbsp,
        whitespace_normalized=collapsed != cleaned,
        unicode_normalized=unicode_normalized,
    )


def normalize_text_lines(text: str) -> LinesNormalization:
    """Normalize each ``\\n``-separated line independently."""
    return LinesNormalization(lines=[normalize_unicode_text(line) for line in text.split("\n")])


def get_normalized_text(results: Iterable[NormalizationResult]) -> str:
    return "\n".join(r.normalized for r in results)


def detect_zero_width_chars(text: str) -> List[Dict[str, Any]]:
    """Locate zero-width characters.

    Returns:
        One entry per occurrence: {"index", "char", "unicode"} where unicode
        is the code point as "U+200B"
    """
    return [
        {"index": idx, "char": char, "unicode": f"U+{ord(char):04X}"}
        for idx, char in enumerate(text)
        if char in ZERO_WIDTH_CHARS
    ]


def detect_non_breaking_spaces(text: str) -> List[int]:
    return [idx for idx, char in enumerate(text) if char == NON_BREAKING_SPACE]


def get_unicode_info(text: str) -> Dict[str, bool]:
    info = {
        "is_" + form.lower(): unicodedata.is_normalized(form, text)
        for form in ("NFC", "NFD", "NFKC", "NFKD")
    }
    info["needs_normalization"] = not info["is_nfc"]
    return info


def analyze_text(text: str) -> Dict[str, Any]:
    """Character breakdown shown next to the normalization output."""
    zero_width = len(detect_zero_width_chars(text))
    nbsp = len(detect_non_breaking_spaces(text))
    regular_spaces = text.count(" ")
    newlines = text.count("\n")
    invisible = zero_width + nbsp
    return {
        "total_characters": len(text),
        "visible_characters": len(text) - invisible - newlines,
        "invisible_characters": invisible,
        "whitespace_characters": regular_spaces + nbsp + newlines,
        "zero_width_characters": zero_width,
        "non_breaking_spaces": nbsp,
        "regular_spaces": regular_spaces,
        "newlines": newlines,
        "unicode_info": get_unicode_info(text),
    }
