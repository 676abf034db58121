"""
Text upload helpers for the WER service.
Handles extension checks and decoding of uploaded transcript files.
"""
from __future__ import annotations

import os
from typing import Collection, Optional

from werkzeug.datastructures import FileStorage

ALLOWED_TEXT_EXTENSIONS = {".txt"}
ALLOWED_CSV_EXTENSIONS = {".csv", ".txt"}


class UploadError(ValueError):
    """Uploaded or submitted text could not be used."""


def has_allowed_extension(
    filename: Optional[str], extensions: Collection[str] = ALLOWED_TEXT_EXTENSIONS
) -> bool:
    """
    Check that an uploaded file is a plain-text transcript.

    Example:
        >>> has_allowed_extension('ground_truth.TXT')
        True
        >>> has_allowed_extension('audio.wav')
        False
    """
    if not filename:
        return False
    _, ext = os.path.splitext(filename)
    return ext.lower() in extensions


def read_text_upload(
    file: FileStorage,
    label: str = "file",
    extensions: Collection[str] = ALLOWED_TEXT_EXTENSIONS,
) -> str:
    """
    Decode an uploaded .txt file.

    Args:
        file: Werkzeug upload from request.files
        label: Human-readable name used in error messages
        extensions: Accepted lowercase extensions, dot included

    Returns:
        File content as str (UTF-8, a leading BOM is dropped)

    Raises:
        UploadError: wrong extension or content is not UTF-8
    """
    if not has_allowed_extension(file.filename, extensions):
        allowed = "/".join(sorted(extensions))
        raise UploadError(f"Please upload a {allowed} file for {label}")
    try:
        return file.read().decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise UploadError(f"Error reading {label} file: not valid UTF-8") from exc
