"""Logging setup shared by the API server and the terminal editor."""
from __future__ import annotations
import logging
import re
import sys
from typing import Optional

from ielts_writer.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class SensitiveDataFilter(logging.Filter):
    """Masks bearer tokens and API keys before a record is emitted."""

    SENSITIVE_PATTERNS = [
        (re.compile(r"Bearer\s+[^\s\"',]+", re.IGNORECASE), "Bearer ***"),
        (re.compile(r"(api[_-]?key[\"']?\s*[:=]\s*[\"']?)[^\s\"',&]+", re.IGNORECASE), r"\1***"),
        (re.compile(r"sk-[A-Za-z0-9-]{8,}"), "sk-***"),
    ]

    def _mask(self, value: str) -> str:
        for pattern, replacement in self.SENSITIVE_PATTERNS:
            value = pattern.sub(replacement, value)
        return value

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = self._mask(record.msg)
        if record.args and isinstance(record.args, tuple):
            record.args = tuple(self._mask(a) if isinstance(a, str) else a for a in record.args)
        return True


def setup_logging(level: Optional[str] = None) -> None:
    """Install a single stream handler on the root logger (idempotent)."""
    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)
    for handler in root.handlers:
        if getattr(handler, "_ielts_writer", False):
            return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(SensitiveDataFilter())
    handler._ielts_writer = True  # type: ignore[attr-defined]
    root.addHandler(handler)
