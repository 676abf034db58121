"""CSV transcript tables: parse, clean a column, serialize."""
from __future__ import annotations

import csv
import io
from typing import Dict, List, Sequence, Tuple

from .transcript_cleaner import ProcessingResult, clean_transcript

DEFAULT_TRANSCRIPT_COLUMN = "transcript"


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Parse CSV text with a header row into a list of row dicts.

    Blank lines are skipped, values are trimmed and short rows are padded
    with "".
    """
    reader = csv.reader(io.StringIO(text.strip()), skipinitialspace=True)
    rows = [row for row in reader if any(cell.strip() for cell in row)]
    if not rows:
        return []

    headers = [h.strip() for h in rows[0]]
    data: List[Dict[str, str]] = []
    for row in rows[1:]:
        values = [v.strip() for v in row]
        data.append({h: values[i] if i < len(values) else "" for i, h in enumerate(headers)})
    return data


def to_csv(rows: Sequence[Dict[str, object]]) -> str:
    """Serialize rows; the header is every key seen, in first-seen order."""
    if not rows:
        return ""
    headers: List[str] = []
    for row in rows:
        for key in row:
            if key not in headers:
                headers.append(key)
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(headers)
    for row in rows:
        writer.writerow(["" if row.get(h) is None else str(row.get(h)) for h in headers])
    return buf.getvalue().rstrip("\n")


def process_csv_rows(
    rows: Sequence[Dict[str, str]], column: str = DEFAULT_TRANSCRIPT_COLUMN
) -> Tuple[List[Dict[str, str]], List[ProcessingResult]]:
    """Clean ``column`` in every row, keeping the raw text in ``<column>_original``.

    Returns:
        (processed rows, one ProcessingResult per input row)
    """
    processed: List[Dict[str, str]] = []
    results: List[ProcessingResult] = []
    for row in rows:
        value = row.get(column) or ""
        result = clean_transcript(value)
        results.append(result)
        if value:
            row = {**row, column: result.cleaned, f"{column}_original": result.original}
        processed.append(dict(row))
    return processed, results
