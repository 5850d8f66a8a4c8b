# gitguy/diffing/edits.py
# Edit script production & application between two text revisions

from __future__ import annotations

import difflib
from dataclasses import dataclass

from ..core.exceptions import EditApplyError


# * Single replace-range transformation over the original text
# * start/end are character offsets into the original str; start <= end
@dataclass(frozen=True, slots=True)
class EditOperation:
    start: int
    end: int
    replacement: str = ""


# * Split text into lines keeping "\n" endings; a final line w/out newline is kept as-is
# ! str.splitlines() is not used since it also breaks on \r, \x0b, \x1c etc.
def split_lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


# character offset of every line start, plus len(text) as the final sentinel
def line_offsets(lines: list[str]) -> list[int]:
    offsets = [0]
    for line in lines:
        offsets.append(offsets[-1] + len(line))
    return offsets


# * Produce an ordered, non-overlapping line-granular edit script turning original into revised
def diff_strings(original: str, revised: str) -> list[EditOperation]:
    if original == revised:
        return []

    old_lines = split_lines(original)
    new_lines = split_lines(revised)
    offsets = line_offsets(old_lines)

    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    edits: list[EditOperation] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            continue
        edits.append(
            EditOperation(offsets[i1], offsets[i2], "".join(new_lines[j1:j2]))
        )
    return edits


# * Splice edits into original in order; raises EditApplyError on unordered/out-of-range edits
def apply_edits(original: str, edits: list[EditOperation]) -> str:
    parts: list[str] = []
    cursor = 0
    for edit in edits:
        if edit.start < cursor:
            raise EditApplyError(
                f"edit at {edit.start} overlaps or precedes previous edit ending at {cursor}",
                offset=edit.start,
            )
        if edit.end < edit.start:
            raise EditApplyError(
                f"edit end {edit.end} is before its start {edit.start}",
                offset=edit.start,
            )
        if edit.end > len(original):
            raise EditApplyError(
                f"edit end {edit.end} is past end of text ({len(original)} chars)",
                offset=edit.end,
            )
        parts.append(original[cursor : edit.start])
        parts.append(edit.replacement)
        cursor = edit.end
    parts.append(original[cursor:])
    return "".join(parts)
