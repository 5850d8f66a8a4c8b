# gitguy/ui/diff_viewer/classifier.py
# Line classification: edit scripts or unified diff text -> ClassifiedLine stream

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from ...core.verbose import vlog_debug
from ...diffing.edits import EditOperation
from ...diffing.file_diff import FileDiff
from ...diffing.unified import DEFAULT_CONTEXT, build_hunks


class LineKind(Enum):
    CONTEXT = "context"
    DELETE = "delete"
    ADD = "add"
    HUNK_HEADER = "hunk_header"
    FILE_HEADER = "file_header"


class PaneSide(Enum):
    LEFT = "left"
    RIGHT = "right"


# * One diff line w/ its kind & line numbers on both sides (headers carry none)
@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    kind: LineKind
    text: str
    old_line: int | None = None
    new_line: int | None = None
    filename: str = ""

    @property
    def is_header(self) -> bool:
        return self.kind in (LineKind.HUNK_HEADER, LineKind.FILE_HEADER)

    @property
    def is_change(self) -> bool:
        return self.kind in (LineKind.DELETE, LineKind.ADD)

    # non-empty content that trims to nothing (tabs vs spaces etc.)
    @property
    def is_whitespace_only(self) -> bool:
        return self.text != "" and self.text.strip() == ""

    # deletions & context number against the original, additions against the revision
    @property
    def source_line_number(self) -> int | None:
        if self.kind == LineKind.ADD:
            return self.new_line
        if self.kind in (LineKind.DELETE, LineKind.CONTEXT):
            return self.old_line
        return None

    # context lines show the revision's number on the right pane
    def number_for(self, side: PaneSide) -> int | None:
        if self.kind == LineKind.CONTEXT and side == PaneSide.RIGHT:
            return self.new_line
        return self.source_line_number


# C0 controls except tab & newline, plus DEL; keeps stray escapes out of the terminal
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")
_OLD_START = re.compile(r"-(\d+)")
_NEW_START = re.compile(r"\+(\d+)")
_DIFF_GIT = re.compile(r"^diff --git a/(.+?) b/(.+)$")


def sanitize_content(text: str) -> str:
    return _CONTROL_CHARS.sub("", text.rstrip("\r"))


# strip a/ or b/ prefix & any trailing tab-separated timestamp from a ---/+++ path
def _header_path(raw: str) -> str:
    path = raw[4:].split("\t", 1)[0].strip()
    if path.startswith(("a/", "b/")):
        path = path[2:]
    return path


# * Parse "@@ -a,b +c,d @@"; returns (old_start, old_count, new_start, new_count)
# * counts are None when the header is malformed; starts fall back to 1
def parse_hunk_header(line: str) -> tuple[int, int | None, int, int | None]:
    match = _HUNK_HEADER.match(line)
    if match:
        old_start = int(match.group(1))
        old_count = int(match.group(2)) if match.group(2) is not None else 1
        new_start = int(match.group(3))
        new_count = int(match.group(4)) if match.group(4) is not None else 1
        return old_start, old_count, new_start, new_count

    body = line.strip("@ ")
    old_match = _OLD_START.search(body)
    new_match = _NEW_START.search(body)
    old_start = int(old_match.group(1)) if old_match else 1
    new_start = int(new_match.group(1)) if new_match else 1
    vlog_debug("DIFF", f"Malformed hunk header, numbering approximate: {line!r}")
    return old_start, None, new_start, None


_PREFIX_KINDS = {"-": LineKind.DELETE, "+": LineKind.ADD, " ": LineKind.CONTEXT}


def _header(kind: LineKind, raw: str, filename: str) -> ClassifiedLine:
    return ClassifiedLine(kind, sanitize_content(raw), filename=filename)


# * Classify unified diff text; malformed input degrades to approximate numbering
def classify_unified(text: str) -> list[ClassifiedLine]:
    lines: list[ClassifiedLine] = []
    filename = ""
    old_no = new_no = 1
    old_left = new_left = 0
    loose = False  # inside a hunk whose header had no usable counts

    def add_content(kind: LineKind, body: str) -> None:
        nonlocal old_no, new_no, old_left, new_left
        lines.append(
            ClassifiedLine(
                kind,
                sanitize_content(body),
                old_no if kind != LineKind.ADD else None,
                new_no if kind != LineKind.DELETE else None,
                filename,
            )
        )
        if kind != LineKind.ADD:
            old_no += 1
            old_left -= 1
        if kind != LineKind.DELETE:
            new_no += 1
            new_left -= 1

    for raw in text.split("\n"):
        raw = raw.rstrip("\r")

        # ===== HUNK BODY =====
        # pending declared counts: "---"/"+++" lines are content, "" is a blank line
        if old_left > 0 or new_left > 0:
            if raw == "":
                add_content(LineKind.CONTEXT, "")
                continue
            kind = _PREFIX_KINDS.get(raw[0])
            if (
                kind == LineKind.CONTEXT
                or (kind == LineKind.DELETE and old_left > 0)
                or (kind == LineKind.ADD and new_left > 0)
            ):
                add_content(kind, raw[1:])
                continue
            if raw[0] == "\\":
                continue
            # body disagrees w/ the declared counts; treat as a header line
            old_left = new_left = 0

        # ===== HEADERS & METADATA =====
        if raw.startswith("diff --git "):
            match = _DIFF_GIT.match(raw)
            if match:
                filename = match.group(2)
            lines.append(_header(LineKind.FILE_HEADER, raw, filename))
            loose = False
        elif raw.startswith(("--- ", "+++ ")):
            path = _header_path(raw)
            if path != "/dev/null":
                filename = path
            lines.append(_header(LineKind.FILE_HEADER, raw, filename))
            loose = False
        elif raw.startswith("@@"):
            old_no, old_count, new_no, new_count = parse_hunk_header(raw)
            loose = old_count is None or new_count is None
            old_left = old_count or 0
            new_left = new_count or 0
            lines.append(_header(LineKind.HUNK_HEADER, raw, filename))
        elif loose and raw[:1] in _PREFIX_KINDS:
            add_content(_PREFIX_KINDS[raw[0]], raw[1:])
        # index/mode lines, "\ No newline" markers & stray blank lines are skipped

    return lines


# * Classify an edit script directly from its hunks w/ exact numbering
def classify_edits(
    edits: list[EditOperation],
    original: str,
    filename: str,
    context: int = DEFAULT_CONTEXT,
) -> list[ClassifiedLine]:
    hunks = build_hunks(original, edits, context)
    if not hunks:
        return []

    lines = [
        _header(LineKind.FILE_HEADER, f"--- a/{filename}", filename),
        _header(LineKind.FILE_HEADER, f"+++ b/{filename}", filename),
    ]
    for hunk in hunks:
        lines.append(_header(LineKind.HUNK_HEADER, hunk.header, filename))
        old_no, new_no = hunk.old_start, hunk.new_start
        for hunk_line in hunk.lines:
            text = sanitize_content(hunk_line.text)
            if hunk_line.kind == "-":
                line = ClassifiedLine(LineKind.DELETE, text, old_no, None, filename)
                old_no += 1
            elif hunk_line.kind == "+":
                line = ClassifiedLine(LineKind.ADD, text, None, new_no, filename)
                new_no += 1
            else:
                line = ClassifiedLine(LineKind.CONTEXT, text, old_no, new_no, filename)
                old_no += 1
                new_no += 1
            lines.append(line)
    return lines


# * Classify several files; each changed file is introduced by a diff --git header
def classify_file_diffs(
    file_diffs: Iterable[FileDiff], context: int = DEFAULT_CONTEXT
) -> list[ClassifiedLine]:
    lines: list[ClassifiedLine] = []
    for file_diff in file_diffs:
        body = classify_edits(
            file_diff.edits, file_diff.original, file_diff.filename, context
        )
        if not body:
            continue
        header = f"diff --git a/{file_diff.filename} b/{file_diff.filename}"
        lines.append(_header(LineKind.FILE_HEADER, header, file_diff.filename))
        lines.extend(body)
    return lines
