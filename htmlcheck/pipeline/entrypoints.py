"""Suite entrypoint: runs the checks in order behind the existence gate."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TypeAlias

from htmlcheck.errors import (
    BEST_PRACTICES,
    FILE_MISSING,
    INDENTATION,
    VALIDATION,
    MultiLineError,
    ToolError,
)
from htmlcheck.format import Beautifier, DjlintBeautifier
from htmlcheck.lint import DjlintLinter, Linter
from htmlcheck.options import SuiteOptions
from htmlcheck.pipeline.checks import (
    EXISTS,
    FOLLOWS_BEST_PRACTICES,
    IS_INDENTED,
    IS_VALID,
    check_best_practices,
    check_exists,
    check_indentation,
    check_valid,
    target_exists,
)
from htmlcheck.pipeline.results import CheckRunResult, SuiteRunResult
from htmlcheck.validate import NuValidator, Validator

LOGGER = logging.getLogger(__name__)

CheckFn: TypeAlias = Callable[[], None | Awaitable[None]]


def run_suite(
    options: SuiteOptions | None = None,
    *,
    validator: Validator | None = None,
    linter: Linter | None = None,
    beautifier: Beautifier | None = None,
) -> SuiteRunResult:
    """Run the suite against `options.path`.

    When the target file is missing only `exists` runs; the other checks are
    left out of the result entirely.
    """
    resolved_options = options if options is not None else SuiteOptions.from_env()
    resolved_validator = (
        validator
        if validator is not None
        else NuValidator(url=resolved_options.validator_url, timeout=resolved_options.timeout)
    )
    resolved_linter = linter if linter is not None else DjlintLinter()
    resolved_beautifier = beautifier if beautifier is not None else DjlintBeautifier()

    checks: list[tuple[str, str, CheckFn]] = [
        (EXISTS, FILE_MISSING, lambda: check_exists(resolved_options)),
    ]
    if target_exists(resolved_options):
        checks.extend(
            [
                (IS_VALID, VALIDATION, lambda: check_valid(resolved_options, resolved_validator)),
                (
                    FOLLOWS_BEST_PRACTICES,
                    BEST_PRACTICES,
                    lambda: check_best_practices(resolved_options, resolved_linter),
                ),
                (
                    IS_INDENTED,
                    INDENTATION,
                    lambda: check_indentation(resolved_options, resolved_beautifier),
                ),
            ]
        )
    else:
        LOGGER.info("%s is missing; skipping remaining checks", resolved_options.path)

    results = asyncio.run(_run_checks(checks))
    return SuiteRunResult(suite=f"# {resolved_options.target}", checks=results)


async def _run_checks(checks: list[tuple[str, str, CheckFn]]) -> list[CheckRunResult]:
    results: list[CheckRunResult] = []
    for name, title, check in checks:
        results.append(await _run_check(name, title, check))
    return results


async def _run_check(name: str, title: str, check: CheckFn) -> CheckRunResult:
    LOGGER.debug("Running check %r", name)
    try:
        outcome = check()
        if inspect.isawaitable(outcome):
            await outcome
    except MultiLineError as exc:
        LOGGER.info("Check %r failed: %s", name, exc.title)
        return CheckRunResult(name=name, error=exc)
    except Exception as exc:
        LOGGER.exception("Check %r raised unexpectedly", name)
        return CheckRunResult(
            name=name,
            error=ToolError(title, type(exc).__name__, str(exc) or repr(exc)),
        )
    return CheckRunResult(name=name)
