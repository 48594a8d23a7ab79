"""Best-practice lint runner over a single HTML file."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Protocol

from djlint.lint import linter as djlint_linter
from djlint.settings import Config

from htmlcheck.diagnostics import Diagnostic
from htmlcheck.errors import BEST_PRACTICES, ToolError
from htmlcheck.pipeline.results import LintRunResult

LOGGER = logging.getLogger(__name__)

TOOL_NAME: Final[str] = "djLint"


class Linter(Protocol):
    """Best-practices linter contract."""

    def lint(self, path: Path) -> Sequence[Diagnostic]: ...


@dataclass(frozen=True, slots=True)
class DjlintLinter:
    """Runs djLint's HTML rule set over a file."""

    profile: str = "html"
    # H014 flags the blank lines the beautifier is told to keep.
    ignore: str = "H014"

    def lint(self, path: Path) -> list[Diagnostic]:
        path = Path(path)
        html = path.read_text(encoding="utf-8")
        try:
            config = Config(str(path), profile=self.profile, ignore=self.ignore)
            report = djlint_linter(config, html, str(path), path.as_posix())
        except Exception as exc:
            LOGGER.exception("djLint crashed on %s", path)
            raise ToolError(BEST_PRACTICES, TOOL_NAME, str(exc) or type(exc).__name__) from exc

        diagnostics: list[Diagnostic] = []
        for findings in report.values():
            diagnostics.extend(parse_djlint_finding(finding) for finding in findings)
        LOGGER.info("djLint reported %d finding(s) for %s", len(diagnostics), path)
        return diagnostics


def parse_djlint_finding(finding: Mapping[str, Any]) -> Diagnostic:
    """Map one djLint finding (`line` is `"<line>:<column>"`) to a diagnostic."""
    line = _parse_line(str(finding.get("line", "")))
    return Diagnostic(
        message=str(finding.get("message", "")),
        line=line,
        last_line=line,
        code=finding.get("code"),
        severity="warning",
    )


def run_lint(path: Path, linter: Linter) -> LintRunResult:
    """Run the linter once; findings are reported as-is."""
    return LintRunResult(diagnostics=list(linter.lint(path)))


def _parse_line(raw: str) -> int | None:
    head, _, _ = raw.partition(":")
    try:
        return int(head)
    except ValueError:
        return None
