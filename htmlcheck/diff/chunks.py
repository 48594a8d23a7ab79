"""Line-level diff chunks between an original and a reformatted document."""

from __future__ import annotations

from dataclasses import dataclass
from difflib import SequenceMatcher


@dataclass(frozen=True, slots=True)
class DiffChunk:
    """Maximal run of lines that were kept, inserted or deleted.

    Invariant:
    - `added` and `removed` are never both set
    - `count` is the number of lines the chunk spans
    """

    text: str
    count: int
    added: bool = False
    removed: bool = False

    def __post_init__(self):
        if self.added and self.removed:
            raise ValueError("DiffChunk cannot be both added and removed")
        if self.count < 0:
            raise ValueError("DiffChunk count cannot be negative")

    @property
    def changed(self) -> bool:
        return self.added or self.removed


def diff_lines(original: str, changed: str) -> list[DiffChunk]:
    """Diff two texts line by line.

    Replaced regions are emitted as a removed chunk immediately followed by
    an added chunk.
    """
    original_lines = original.splitlines(keepends=True)
    changed_lines = changed.splitlines(keepends=True)

    matcher = SequenceMatcher(None, original_lines, changed_lines, autojunk=False)
    chunks: list[DiffChunk] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            chunks.append(_chunk(original_lines[i1:i2]))
        elif tag == "delete":
            chunks.append(_chunk(original_lines[i1:i2], removed=True))
        elif tag == "insert":
            chunks.append(_chunk(changed_lines[j1:j2], added=True))
        else:
            chunks.append(_chunk(original_lines[i1:i2], removed=True))
            chunks.append(_chunk(changed_lines[j1:j2], added=True))

    return chunks


def _chunk(lines: list[str], *, added: bool = False, removed: bool = False) -> DiffChunk:
    return DiffChunk(text="".join(lines), count=len(lines), added=added, removed=removed)
