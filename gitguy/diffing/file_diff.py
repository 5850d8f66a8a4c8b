# gitguy/diffing/file_diff.py
# Per-file edit scripts & helpers for combining them into a single diff

from __future__ import annotations

from dataclasses import dataclass, field

from .edits import EditOperation, diff_strings
from .unified import DEFAULT_CONTEXT, to_unified


# * Edit script for one file, kept w/ the original content it applies to
@dataclass(slots=True)
class FileDiff:
    filename: str
    original: str
    edits: list[EditOperation] = field(default_factory=list)

    @classmethod
    def from_contents(cls, filename: str, original: str, revised: str) -> "FileDiff":
        return cls(filename, original, diff_strings(original, revised))

    @property
    def has_changes(self) -> bool:
        return bool(self.edits)

    # unified text w/ git-style a/ & b/ labels
    def unified(self, context: int = DEFAULT_CONTEXT) -> str:
        return to_unified(
            f"a/{self.filename}", f"b/{self.filename}", self.original, self.edits, context
        )


# * Concatenate unified text of every changed file, each introduced by a diff --git line
def combine_file_diffs(
    file_diffs: list[FileDiff], context: int = DEFAULT_CONTEXT
) -> str:
    parts: list[str] = []
    for file_diff in file_diffs:
        body = file_diff.unified(context)
        if not body:
            continue
        parts.append(f"diff --git a/{file_diff.filename} b/{file_diff.filename}\n")
        parts.append(body)
    return "".join(parts)
