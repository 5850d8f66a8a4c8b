# gitguy/ui/diff_viewer/static.py
# Non-interactive side-by-side rendering of an edit script to an ANSI string

from __future__ import annotations

import io

from ...core.exceptions import DiffError, EditApplyError
from ...diffing.edits import EditOperation, apply_edits
from ...diffing.unified import to_unified
from ..core.rich_components import Console, Text
from .classifier import classify_edits
from .layout import plan_layout
from .pane_builder import PaneBuilder, compose_rows
from .row_renderer import RowRenderer

NO_CHANGES_MESSAGE = "No changes to display"
GENERATE_ERROR_MESSAGE = "Error generating diff"
APPLY_ERROR_MESSAGE = "Error applying edits"


# * Print rows through an off-screen terminal console & return the ANSI text
def rows_to_ansi(rows: list[Text], width: int) -> str:
    buffer = io.StringIO()
    capture = Console(
        file=buffer,
        width=max(width, 1),
        force_terminal=True,
        color_system="256",
        legacy_windows=False,
    )
    for row in rows:
        capture.print(row, no_wrap=True, overflow="crop", soft_wrap=False)
    return buffer.getvalue().removesuffix("\n")


# * Side-by-side text for an edit script; unified text when the width cannot fit two panes
def render_side_by_side_from_edits(
    edits: list[EditOperation],
    original: str,
    filename: str,
    width: int,
    syntax_highlight: bool = False,
    show_whitespace: bool = False,
) -> str:
    if not edits:
        return NO_CHANGES_MESSAGE

    layout = plan_layout(width)
    if not layout.is_side_by_side:
        try:
            return to_unified(f"a/{filename}", f"b/{filename}", original, edits)
        except DiffError:
            return GENERATE_ERROR_MESSAGE

    try:
        apply_edits(original, edits)
        lines = classify_edits(edits, original, filename)
    except EditApplyError:
        return APPLY_ERROR_MESSAGE
    if not lines:
        return NO_CHANGES_MESSAGE

    builder = PaneBuilder(RowRenderer(syntax_highlight=syntax_highlight), show_whitespace)
    panes = builder.build(lines, layout.left_width, layout.right_width)
    return rows_to_ansi(compose_rows(panes), layout.total_width)
