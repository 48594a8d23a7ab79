"""Run result carriers for the individual tools and the whole suite."""

from __future__ import annotations

from dataclasses import dataclass, field

from htmlcheck.diagnostics import Diagnostic
from htmlcheck.diff import DiffChunk
from htmlcheck.errors import MultiLineError


@dataclass(frozen=True, slots=True)
class ValidateRunResult:
    """Validator output before and after noise filtering."""

    diagnostics: list[Diagnostic]
    included: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class LintRunResult:
    """Best-practice findings, unfiltered."""

    diagnostics: list[Diagnostic]


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of beautifying a document and diffing it against the original."""

    source_text: str
    formatted_text: str
    changed: bool
    chunks: list[DiffChunk] = field(default_factory=list)
    divergences: list[int] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CheckRunResult:
    """Outcome of one named check."""

    name: str
    error: MultiLineError | None = None

    @property
    def passed(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class SuiteRunResult:
    """Outcomes of the checks that ran, in the order they ran."""

    suite: str
    checks: list[CheckRunResult]

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> list[CheckRunResult]:
        return [check for check in self.checks if not check.passed]

    def check(self, name: str) -> CheckRunResult | None:
        for result in self.checks:
            if result.name == name:
                return result
        return None
