"""Best-practice linting."""

from htmlcheck.lint.runner import DjlintLinter, Linter, parse_djlint_finding, run_lint

__all__ = [
    "DjlintLinter",
    "Linter",
    "parse_djlint_finding",
    "run_lint",
]
