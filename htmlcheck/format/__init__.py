"""Beautification and indentation diffing."""

from htmlcheck.format.options import BeautifyOptions
from htmlcheck.format.runner import Beautifier, DjlintBeautifier, run_format

__all__ = [
    "Beautifier",
    "BeautifyOptions",
    "DjlintBeautifier",
    "run_format",
]
