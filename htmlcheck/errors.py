"""Failure values raised by the checks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

FILE_MISSING: Final[str] = "File missing"
VALIDATION: Final[str] = "Validation"
BEST_PRACTICES: Final[str] = "Best practices"
INDENTATION: Final[str] = "Indentation"


class MultiLineError(Exception):
    """A failed check: a short title plus an ordered list of detail lines.

    Raising one aborts the check that raised it and nothing else. The title
    and details are kept separately so reporters can lay them out however
    they like; `str()` gives the plain-text rendering.
    """

    def __init__(self, title: str, details: Sequence[str]) -> None:
        if isinstance(details, str):
            raise TypeError("details must be a sequence of strings, not a string")
        self._title = title
        self._details = tuple(details)
        super().__init__(title, self._details)

    @property
    def title(self) -> str:
        return self._title

    @property
    def details(self) -> tuple[str, ...]:
        return self._details

    def __str__(self) -> str:
        return "\n".join([self._title, *(f"  {detail}" for detail in self._details)])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._title!r}, {list(self._details)!r})"


class ToolError(MultiLineError):
    """An external collaborator (validator, linter, beautifier) failed outright."""

    def __init__(self, title: str, tool: str, cause: str) -> None:
        self.tool = tool
        self.cause = cause
        super().__init__(title, [f"{tool} failed: {cause}"])

    def __reduce__(self):
        return (type(self), (self.title, self.tool, self.cause))
