"""Existence, validity, best-practice and indentation checks for index.html."""

from htmlcheck.errors import MultiLineError, ToolError
from htmlcheck.options import SuiteOptions
from htmlcheck.pipeline import CheckRunResult, SuiteRunResult, run_suite

__all__ = [
    "CheckRunResult",
    "MultiLineError",
    "SuiteOptions",
    "SuiteRunResult",
    "ToolError",
    "run_suite",
]
