"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic reported by the validator or the linter.

    `line` and `last_line` are `None` for document-level messages.
    """

    message: str
    line: int | None = None
    last_line: int | None = None
    code: str | None = None
    severity: Severity = "error"

    def __post_init__(self):
        if self.line is not None and self.line < 0:
            raise ValueError("Diagnostic line cannot be negative")
        if self.last_line is not None and self.last_line < 0:
            raise ValueError("Diagnostic last_line cannot be negative")
