"""Run result carriers and lazy suite entrypoint export."""

from __future__ import annotations

from typing import TYPE_CHECKING

from htmlcheck.pipeline.results import (
    CheckRunResult,
    FormatRunResult,
    LintRunResult,
    SuiteRunResult,
    ValidateRunResult,
)

if TYPE_CHECKING:
    from htmlcheck.format import Beautifier
    from htmlcheck.lint import Linter
    from htmlcheck.options import SuiteOptions
    from htmlcheck.validate import Validator


def run_suite(
    options: SuiteOptions | None = None,
    *,
    validator: Validator | None = None,
    linter: Linter | None = None,
    beautifier: Beautifier | None = None,
) -> SuiteRunResult:
    from htmlcheck.pipeline.entrypoints import run_suite as _run_suite

    return _run_suite(options, validator=validator, linter=linter, beautifier=beautifier)


__all__ = [
    "CheckRunResult",
    "FormatRunResult",
    "LintRunResult",
    "SuiteRunResult",
    "ValidateRunResult",
    "run_suite",
]
