# gitguy/diffing/unified.py
# Hunk construction from an edit script & GNU-style unified diff formatting

from __future__ import annotations

import bisect
from dataclasses import dataclass, field

from .edits import EditOperation, apply_edits, split_lines

DEFAULT_CONTEXT = 3
NO_NEWLINE_MARKER = "\\ No newline at end of file"


# * One changed region expressed in whole lines of the original
@dataclass(slots=True)
class LineChange:
    old_index: int  # 0-based index of the first replaced original line
    old_lines: list[str]
    new_lines: list[str]

    @property
    def old_end(self) -> int:
        return self.old_index + len(self.old_lines)


# * A single line inside a hunk; kind is " ", "-" or "+"
@dataclass(frozen=True, slots=True)
class HunkLine:
    kind: str
    text: str
    missing_newline: bool = False


# * Contiguous diff block w/ 1-based starting line numbers for both sides
@dataclass(slots=True)
class Hunk:
    old_start: int
    new_start: int
    lines: list[HunkLine] = field(default_factory=list)

    @property
    def old_count(self) -> int:
        return sum(1 for line in self.lines if line.kind != "+")

    @property
    def new_count(self) -> int:
        return sum(1 for line in self.lines if line.kind != "-")

    @property
    def header(self) -> str:
        old = _format_range(self.old_start, self.old_count)
        new = _format_range(self.new_start, self.new_count)
        return f"@@ -{old} +{new} @@"


# GNU range: empty ranges name the preceding line, single-line ranges omit the count
def _format_range(start: int, count: int) -> str:
    if count == 0:
        return f"{start - 1},0"
    if count == 1:
        return f"{start}"
    return f"{start},{count}"


# offset of every line start; a trailing newline (or empty text) adds a start at len(text)
def _line_starts(original: str) -> list[int]:
    starts = [0]
    for index, char in enumerate(original):
        if char == "\n":
            starts.append(index + 1)
    return starts


# offset of the start of the line containing offset
def _floor_line(starts: list[int], offset: int) -> int:
    return starts[bisect.bisect_right(starts, offset) - 1]


# offset of the first line start at or after offset (or end of text)
def _ceil_line(starts: list[int], offset: int, text_length: int) -> int:
    index = bisect.bisect_left(starts, offset)
    if index < len(starts):
        return starts[index]
    return text_length


# * Expand character-level edits to whole-line changes; overlapping line spans are merged
def line_changes(original: str, edits: list[EditOperation]) -> list[LineChange]:
    # validate ordering & bounds up front
    apply_edits(original, edits)

    starts = _line_starts(original)
    size = len(original)

    # [span_start, span_end, edits] groups w/ overlapping line spans merged
    groups: list[list] = []
    for edit in edits:
        span_start = _floor_line(starts, edit.start)
        span_end = _ceil_line(starts, edit.end, size)
        if groups and span_start < groups[-1][1]:
            groups[-1][1] = max(groups[-1][1], span_end)
            groups[-1][2].append(edit)
        else:
            groups.append([span_start, span_end, [edit]])

    changes: list[LineChange] = []
    index = 0
    while index < len(groups):
        span_start, span_end, group = groups[index]
        new_text = _apply_within(original, span_start, span_end, group)

        # replacement w/out trailing newline absorbs the following original line
        while new_text and not new_text.endswith("\n") and span_end < size:
            span_end = _ceil_line(starts, span_end + 1, size)
            while index + 1 < len(groups) and groups[index + 1][0] < span_end:
                span_end = max(span_end, groups[index + 1][1])
                group = group + groups[index + 1][2]
                index += 1
            new_text = _apply_within(original, span_start, span_end, group)

        old_lines = split_lines(original[span_start:span_end])
        new_lines = split_lines(new_text)
        if old_lines != new_lines:
            changes.append(
                LineChange(
                    old_index=bisect.bisect_left(starts, span_start),
                    old_lines=old_lines,
                    new_lines=new_lines,
                )
            )
        index += 1
    return changes


def _apply_within(
    original: str, span_start: int, span_end: int, group: list[EditOperation]
) -> str:
    shifted = [
        EditOperation(edit.start - span_start, edit.end - span_start, edit.replacement)
        for edit in group
    ]
    return apply_edits(original[span_start:span_end], shifted)


def _hunk_line(kind: str, raw: str) -> HunkLine:
    if raw.endswith("\n"):
        return HunkLine(kind, raw[:-1])
    return HunkLine(kind, raw, missing_newline=True)


# * Build hunks w/ `context` lines of surrounding context; nearby changes share a hunk
def build_hunks(
    original: str, edits: list[EditOperation], context: int = DEFAULT_CONTEXT
) -> list[Hunk]:
    changes = line_changes(original, edits)
    if not changes:
        return []

    old_lines = split_lines(original)
    context = max(context, 0)

    # cluster changes separated by at most 2*context unchanged lines
    clusters: list[list[LineChange]] = [[changes[0]]]
    for change in changes[1:]:
        if change.old_index - clusters[-1][-1].old_end <= 2 * context:
            clusters[-1].append(change)
        else:
            clusters.append([change])

    hunks: list[Hunk] = []
    delta = 0  # new-side line shift accumulated from earlier changes
    for cluster in clusters:
        first = cluster[0]
        old_from = max(0, first.old_index - context)
        hunk = Hunk(old_start=old_from + 1, new_start=old_from + delta + 1)

        cursor = old_from
        for change in cluster:
            for raw in old_lines[cursor : change.old_index]:
                hunk.lines.append(_hunk_line(" ", raw))
            for raw in change.old_lines:
                hunk.lines.append(_hunk_line("-", raw))
            for raw in change.new_lines:
                hunk.lines.append(_hunk_line("+", raw))
            cursor = change.old_end
            delta += len(change.new_lines) - len(change.old_lines)

        for raw in old_lines[cursor : min(len(old_lines), cursor + context)]:
            hunk.lines.append(_hunk_line(" ", raw))
        hunks.append(hunk)
    return hunks


# * Render hunks as unified diff text; empty string when there is nothing to show
def format_unified(old_label: str, new_label: str, hunks: list[Hunk]) -> str:
    if not hunks:
        return ""
    out = [f"--- {old_label}\n", f"+++ {new_label}\n"]
    for hunk in hunks:
        out.append(hunk.header + "\n")
        for line in hunk.lines:
            out.append(f"{line.kind}{line.text}\n")
            if line.missing_newline:
                out.append(NO_NEWLINE_MARKER + "\n")
    return "".join(out)


# * Edit script -> unified diff text (labels are used verbatim, e.g. "a/path" & "b/path")
def to_unified(
    old_label: str,
    new_label: str,
    original: str,
    edits: list[EditOperation],
    context: int = DEFAULT_CONTEXT,
) -> str:
    if not edits:
        return ""
    return format_unified(old_label, new_label, build_hunks(original, edits, context))
