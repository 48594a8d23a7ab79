"""The four checks run against the target file."""

from __future__ import annotations

from htmlcheck.diagnostics import format_diagnostic_line
from htmlcheck.errors import (
    BEST_PRACTICES,
    FILE_MISSING,
    INDENTATION,
    VALIDATION,
    MultiLineError,
)
from htmlcheck.format import Beautifier, run_format
from htmlcheck.lint import Linter, run_lint
from htmlcheck.options import SuiteOptions
from htmlcheck.validate import Validator, run_validate

EXISTS = "exists"
IS_VALID = "is valid HTML"
FOLLOWS_BEST_PRACTICES = "follows best practices"
IS_INDENTED = "is properly indented"


def target_exists(options: SuiteOptions) -> bool:
    try:
        return options.path.is_file()
    except OSError:
        return False


def check_exists(options: SuiteOptions) -> None:
    if not target_exists(options):
        raise MultiLineError(
            FILE_MISSING,
            [f"The file `{options.target}` is missing or misspelled."],
        )


async def check_valid(options: SuiteOptions, validator: Validator) -> None:
    result = await run_validate(options.path, validator)

    # At or under the baseline the validator only emitted its standing notices.
    if len(result.diagnostics) <= options.baseline_message_count:
        return

    errors = [format_diagnostic_line(d.last_line, d.message) for d in result.included]
    if errors:
        raise MultiLineError(VALIDATION, errors)


def check_best_practices(options: SuiteOptions, linter: Linter) -> None:
    result = run_lint(options.path, linter)
    if result.diagnostics:
        raise MultiLineError(
            BEST_PRACTICES,
            [format_diagnostic_line(d.line, d.message) for d in result.diagnostics],
        )


def check_indentation(options: SuiteOptions, beautifier: Beautifier) -> None:
    text = options.path.read_text(encoding="utf-8")
    result = run_format(text, beautifier, options.beautify)
    if result.changed:
        raise MultiLineError(INDENTATION, [f"Line {line}" for line in result.divergences])
