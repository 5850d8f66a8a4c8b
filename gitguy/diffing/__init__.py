# gitguy/diffing/__init__.py
# Edit scripts, hunks & unified diff formatting

from .edits import EditOperation, apply_edits, diff_strings, split_lines
from .unified import Hunk, HunkLine, build_hunks, to_unified
from .file_diff import FileDiff, combine_file_diffs

__all__ = [
    "EditOperation",
    "apply_edits",
    "diff_strings",
    "split_lines",
    "Hunk",
    "HunkLine",
    "build_hunks",
    "to_unified",
    "FileDiff",
    "combine_file_diffs",
]
