"""Remove ASR repetition artifacts from transcripts."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Pattern, Tuple

# Speaker-change marker some ASR exports insert
SPEAKER_MARKER = ">>"

# Passes per pattern; a collapse can expose a new repeat
MAX_PASSES = 10

# 2-5 word phrase repeated 3+ times
PHRASE_REPEAT_RE = re.compile(r"\b((?:\S+\s+){1,4}\S+)(?:\s+\1){2,}\b")
# single word repeated 3+ times
WORD_REPEAT_RE = re.compile(r"\b(\S+)(?:\s+\1){2,}\b")
# 2+ character run repeated 3+ times, e.g. laughter "hehehehe"
CHAR_REPEAT_RE = re.compile(r"(.{2,}?)\1{2,}")

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class ProcessingResult:
    original: str
    cleaned: str
    changes: Dict[str, int] = field(default_factory=lambda: {
        "removed_repeated_phrases": 0,
        "removed_repeated_words": 0,
        "removed_repeated_chars": 0,
        "removed_symbols": 0,
    })

    @property
    def modified(self) -> bool:
        return self.original != self.cleaned

    def to_dict(self) -> Dict[str, Any]:
        return {"original": self.original, "cleaned": self.cleaned, "changes": dict(self.changes)}


def _collapse(pattern: Pattern[str], text: str) -> Tuple[str, int]:
    """Replace each repeat with a single occurrence until nothing changes."""
    removed = 0
    for _ in range(MAX_PASSES):
        matches = len(pattern.findall(text))
        if not matches:
            break
        removed += matches
        collapsed = pattern.sub(r"\1", text)
        if collapsed == text:
            break
        text = collapsed
    return text, removed


def clean_transcript(text: str) -> ProcessingResult:
    """Strip speaker markers and collapse repeated phrases, words and characters."""
    result = ProcessingResult(original=text, cleaned=text)
    if not text or not text.strip():
        return result

    cleaned = text
    result.changes["removed_symbols"] = cleaned.count(SPEAKER_MARKER)
    cleaned = cleaned.replace(SPEAKER_MARKER, "")

    cleaned, result.changes["removed_repeated_phrases"] = _collapse(PHRASE_REPEAT_RE, cleaned)
    cleaned, result.changes["removed_repeated_words"] = _collapse(WORD_REPEAT_RE, cleaned)
    cleaned, result.changes["removed_repeated_chars"] = _collapse(CHAR_REPEAT_RE, cleaned)

    result.cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    return result


def batch_clean_texts(texts: Iterable[str]) -> List[ProcessingResult]:
    return [clean_transcript(text) for text in texts]


def get_processing_stats(results: Iterable[ProcessingResult]) -> Dict[str, int]:
    results = list(results)
    stats = {
        "removed_repeated_phrases": 0,
        "removed_repeated_words": 0,
        "removed_repeated_chars": 0,
        "removed_symbols": 0,
    }
    for r in results:
        for key in stats:
            stats[key] += r.changes[key]
    modified = sum(1 for r in results if r.modified)
    return {
        "total_processed": len(results),
        "total_modified": modified,
        "unchanged_count": len(results) - modified,
        **stats,
    }
