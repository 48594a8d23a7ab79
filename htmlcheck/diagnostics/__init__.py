"""Diagnostics."""

from htmlcheck.diagnostics.diagnostic import Diagnostic, Severity
from htmlcheck.diagnostics.filters import (
    filter_diagnostics,
    format_diagnostic_line,
    should_include,
)

__all__ = [
    "Diagnostic",
    "Severity",
    "filter_diagnostics",
    "format_diagnostic_line",
    "should_include",
]
