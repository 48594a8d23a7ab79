"""Reduce diff chunks to the lines where formatting first diverges."""

from __future__ import annotations

from collections.abc import Iterable

from htmlcheck.diff.chunks import DiffChunk


def divergence_lines(chunks: Iterable[DiffChunk]) -> list[int]:
    """Return one 1-based line number per divergence region.

    A line diff reports each changed region as a removed chunk followed by an
    added chunk (or the reverse). The chunk right after a reported one is
    absorbed without being counted, so each region yields a single line.
    Three changed chunks in a row are therefore under-reported.
    """
    lines: list[int] = []
    line_count = 0
    skip_next = False

    for chunk in chunks:
        if skip_next:
            skip_next = False
            continue

        line_count += chunk.count
        if chunk.changed:
            lines.append(line_count)
            skip_next = True

    return lines
