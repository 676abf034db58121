"""Flask service exposing WER scoring and transcript cleanup."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from flask import Flask, jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from api.config import configure_logging, get_host, get_max_upload_bytes, get_port
from api.file_utils import (
    ALLOWED_CSV_EXTENSIONS,
    ALLOWED_TEXT_EXTENSIONS,
    UploadError,
    read_text_upload,
)
from text_cleanup.csv_io import DEFAULT_TRANSCRIPT_COLUMN, parse_csv, process_csv_rows, to_csv
from text_cleanup.transcript_cleaner import clean_transcript, get_processing_stats
from text_cleanup.unicode_normalizer import analyze_text, get_normalized_text, normalize_text_lines
from wer_core import (
    EmptyReferenceError,
    InputTooLargeError,
    InvalidInputError,
    batch_combined,
    batch_per_line,
    compute_wer,
)
from wer_core.scoring.batch import split_lines, summarize_results

configure_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = get_max_upload_bytes()

BATCH_MODES = ("per_line", "combined")
_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}

# ============================================================================
# ERROR HANDLERS
# ============================================================================
@app.errorhandler(EmptyReferenceError)
@app.errorhandler(InvalidInputError)
@app.errorhandler(UploadError)
def handle_bad_input(e):
    return jsonify({"error": str(e)}), 400


@app.errorhandler(InputTooLargeError)
def handle_too_large(e):
    logger.warning("Rejected oversized alignment: %s", e)
    return jsonify({"error": str(e), "cells": e.cells, "limit": e.limit}), 413


@app.errorhandler(RequestEntityTooLarge)
def handle_upload_too_large(e):
    return jsonify({"error": "Upload exceeds the maximum allowed size"}), 413


# ============================================================================
# REQUEST HELPERS
# ============================================================================
def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def _get_text(
    name: str,
    label: str,
    required: bool = True,
    extensions=ALLOWED_TEXT_EXTENSIONS,
) -> Optional[Union[str, List[str]]]:
    """Read a text field from an uploaded ``<name>_file``, JSON body or form."""
    upload = request.files.get(f"{name}_file")
    if upload is not None and upload.filename:
        return read_text_upload(upload, label, extensions)
    value = _payload().get(name)
    if value is None and required:
        raise UploadError(f"Please provide {label} text")
    return value


def _get_flag(name: str) -> bool:
    value = _payload().get(name, False)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _as_lines(value: Union[str, List[str]]) -> List[str]:
    if isinstance(value, list):
        return value
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected text or list of lines, got {type(value).__name__}")
    return split_lines(value)


def _prepare(value: Any, clean: bool) -> Any:
    """Optionally strip zero-width characters and stray whitespace, line by line."""
    if not clean:
        return value
    if isinstance(value, list):
        return [_prepare(line, clean) for line in value]
    if not isinstance(value, str):
        return value
    return get_normalized_text(normalize_text_lines(value).lines)


# ============================================================================
# ROUTES - WER
# ============================================================================
@app.route('/health', methods=['GET'])
def health_check():
    return jsonify({"status": "ok"})


@app.route('/api/wer', methods=['POST'])
def calculate_wer():
    clean = _get_flag("clean")
    reference = _prepare(_get_text("reference", "ground truth"), clean)
    hypothesis = _prepare(_get_text("hypothesis", "transcription"), clean)

    result = compute_wer(reference, hypothesis)
    logger.info("WER computed: wer=%.4f words=%d", result.wer, result.total_words)
    return jsonify(result.to_dict())


@app.route('/api/wer/batch', methods=['POST'])
def calculate_wer_batch():
    mode = _payload().get("mode", "per_line")
    if mode not in BATCH_MODES:
        raise UploadError(f"mode must be one of: {', '.join(BATCH_MODES)}")

    clean = _get_flag("clean")
    ref_lines = _prepare(_as_lines(_get_text("reference", "ground truth")), clean)
    hyp_lines = _prepare(_as_lines(_get_text("hypothesis", "transcription")), clean)

    if mode == "combined":
        result = batch_combined(ref_lines, hyp_lines)
        return jsonify({"mode": mode, "result": result.to_dict()})

    results = batch_per_line(ref_lines, hyp_lines)
    return jsonify({
        "mode": mode,
        "results": [r.to_dict() for r in results],
        "summary": summarize_results(results),
        "unpaired_lines": abs(len(ref_lines) - len(hyp_lines)),
    })


# ============================================================================
# ROUTES - TEXT CLEANUP
# ============================================================================
@app.route('/api/normalize', methods=['POST'])
def normalize():
    text = _get_text("text", "input")
    if not isinstance(text, str):
        raise InvalidInputError("text must be a string")

    normalized = normalize_text_lines(text)
    return jsonify({
        "lines": [r.to_dict() for r in normalized.lines],
        "summary": normalized.summary,
        "normalized_text": get_normalized_text(normalized.lines),
        "analysis": analyze_text(text),
    })


@app.route('/api/process', methods=['POST'])
def process_transcripts():
    csv_text = _get_text("csv", "CSV", required=False, extensions=ALLOWED_CSV_EXTENSIONS)
    if csv_text is None:
        text = _get_text("text", "transcript")
        if not isinstance(text, str):
            raise InvalidInputError("text must be a string")
        return jsonify(clean_transcript(text).to_dict())

    if not isinstance(csv_text, str):
        raise InvalidInputError("csv must be a string")
    column = _payload().get("column") or DEFAULT_TRANSCRIPT_COLUMN
    rows = parse_csv(csv_text)
    if rows and column not in rows[0]:
        raise UploadError(f"Column '{column}' not found in CSV")

    processed, results = process_csv_rows(rows, column)
    return jsonify({
        "csv": to_csv(processed),
        "rows": len(processed),
        "stats": get_processing_stats(results),
    })


if __name__ == '__main__':
    app.run(host=get_host(), port=get_port())
