"""Beautifier configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BeautifyOptions:
    """Layout the beautifier is asked to produce.

    `wrap_line_length=0` disables wrapping.
    """

    indent_size: int = 2
    preserve_newlines: bool = True
    max_preserve_newlines: int = 10
    wrap_line_length: int = 0
    end_with_newline: bool = True
    extra_liners: tuple[str, ...] = ()

    def __post_init__(self):
        if self.indent_size < 1:
            raise ValueError("indent_size must be at least 1")
        if self.max_preserve_newlines < 0:
            raise ValueError("max_preserve_newlines cannot be negative")
        if self.wrap_line_length < 0:
            raise ValueError("wrap_line_length cannot be negative")
