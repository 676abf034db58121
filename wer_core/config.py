"""Runtime configuration for the alignment engine."""
from __future__ import annotations

import os
from typing import Optional

# (m+1) * (n+1) cells; roughly 5000 x 5000 words
DEFAULT_MAX_ALIGNMENT_CELLS = 25_000_000


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def get_str_env(key: str, default: Optional[str] = None) -> Optional[str]:
    return _get_env(key, default)


def get_int_env(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value.replace("_", ""))
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


def get_max_alignment_cells() -> int:
    """Return the matrix size limit; values <= 0 disable the guard.

    Read on every call so the limit can be changed without a restart.
    """
    return get_int_env("WER_MAX_ALIGNMENT_CELLS", DEFAULT_MAX_ALIGNMENT_CELLS)


def get_log_level() -> str:
    return (_get_env("WER_LOG_LEVEL", "INFO") or "INFO").upper()
