"""Line diffing and divergence reporting."""

from htmlcheck.diff.chunks import DiffChunk, diff_lines
from htmlcheck.diff.report import divergence_lines

__all__ = [
    "DiffChunk",
    "diff_lines",
    "divergence_lines",
]
