"""Suppression of known-noisy validator messages."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from htmlcheck.diagnostics.diagnostic import Diagnostic

# Only suppressed when the message carries no line.
_DOCUMENT_NOTICE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    # "Using the HTML parser" notice for text/html content.
    re.compile(r"content-type.*text/html", re.IGNORECASE),
    # "Using the schema for HTML" notice.
    re.compile(r"schema.*html", re.IGNORECASE),
)

# Suppressed wherever they occur.
_FALSE_POSITIVE_PATTERNS: Final[tuple[re.Pattern[str], ...]] = (
    # Google Fonts URLs requesting several families with `|`.
    re.compile(r"bad value.*fonts.*google.*\|", re.IGNORECASE),
    # Elements that "do not need" an explicit ARIA role.
    re.compile(r"element.*does not need.*role", re.IGNORECASE),
)


def should_include(message: str, line: int | None) -> bool:
    """Return `False` for validator messages that are known noise."""
    if not line:
        if any(pattern.search(message) for pattern in _DOCUMENT_NOTICE_PATTERNS):
            return False
    return not any(pattern.search(message) for pattern in _FALSE_POSITIVE_PATTERNS)


def filter_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return [d for d in diagnostics if should_include(d.message, d.line)]


def format_diagnostic_line(line: int | None, message: str) -> str:
    return f"Line {line or 0}: {message}"
