"""Beautify an HTML document and report where it diverges from the original."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Protocol

from djlint.reformat import formatter as djlint_formatter
from djlint.settings import Config

from htmlcheck.diff import diff_lines, divergence_lines
from htmlcheck.errors import INDENTATION, ToolError
from htmlcheck.format.options import BeautifyOptions
from htmlcheck.pipeline.results import FormatRunResult

LOGGER = logging.getLogger(__name__)

TOOL_NAME: Final[str] = "djLint"

# djLint has no "never wrap" switch; a line this long is never reached.
_UNWRAPPED_LINE_LENGTH: Final[int] = 1_000_000


class Beautifier(Protocol):
    """Beautifier contract."""

    def beautify(self, text: str, options: BeautifyOptions) -> str: ...


@dataclass(frozen=True, slots=True)
class DjlintBeautifier:
    """Reformats HTML with djLint's formatter."""

    profile: str = "html"
    src: str = "."

    def beautify(self, text: str, options: BeautifyOptions) -> str:
        try:
            formatted = djlint_formatter(self._config(options), text)
        except Exception as exc:
            LOGGER.exception("djLint formatter crashed")
            raise ToolError(INDENTATION, TOOL_NAME, str(exc) or type(exc).__name__) from exc

        if options.end_with_newline and not formatted.endswith("\n"):
            formatted += "\n"
        return formatted

    def _config(self, options: BeautifyOptions) -> Config:
        return Config(
            self.src,
            profile=self.profile,
            indent=options.indent_size,
            max_line_length=options.wrap_line_length or _UNWRAPPED_LINE_LENGTH,
            preserve_blank_lines=options.preserve_newlines,
            max_blank_lines=options.max_preserve_newlines if options.preserve_newlines else 0,
            blank_line_before_tag=",".join(options.extra_liners),
        )


def run_format(
    text: str,
    beautifier: Beautifier,
    options: BeautifyOptions | None = None,
) -> FormatRunResult:
    """Beautify `text` once and diff the result against it."""
    resolved_options = options if options is not None else BeautifyOptions()
    formatted_text = beautifier.beautify(text, resolved_options)

    if formatted_text == text:
        return FormatRunResult(source_text=text, formatted_text=formatted_text, changed=False)

    chunks = diff_lines(text, formatted_text)
    divergences = divergence_lines(chunks)
    LOGGER.debug("Beautified text diverges at %d place(s)", len(divergences))
    return FormatRunResult(
        source_text=text,
        formatted_text=formatted_text,
        changed=True,
        chunks=chunks,
        divergences=divergences,
    )
