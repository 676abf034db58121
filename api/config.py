"""Configuration and logging setup for the HTTP service."""
from __future__ import annotations

import logging
from typing import Optional

from wer_core.config import get_int_env, get_log_level, get_str_env

DEFAULT_MAX_UPLOAD_BYTES = 5 * 1024 * 1024
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000


def get_max_upload_bytes() -> int:
    return max(1, get_int_env("WER_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))


def get_host() -> str:
    return get_str_env("WER_API_HOST", DEFAULT_HOST) or DEFAULT_HOST


def get_port() -> int:
    return get_int_env("WER_API_PORT", DEFAULT_PORT)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the service process."""
    level = (level or get_log_level()).upper()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        level=getattr(logging, level, logging.INFO),
    )
