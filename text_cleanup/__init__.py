"""Text pre-cleaning applied to transcripts before they are scored."""
from .csv_io import parse_csv, process_csv_rows, to_csv
from .transcript_cleaner import clean_transcript, get_processing_stats
from .unicode_normalizer import analyze_text, normalize_text_lines, normalize_unicode_text

__all__ = [
    "parse_csv",
    "process_csv_rows",
    "to_csv",
    "clean_transcript",
    "get_processing_stats",
    "analyze_text",
    "normalize_text_lines",
    "normalize_unicode_text",
]
