# gitguy/ui/diff_viewer/__init__.py
# Side-by-side diff reflow & rendering engine

from .classifier import (
    ClassifiedLine,
    LineKind,
    PaneSide,
    classify_edits,
    classify_file_diffs,
    classify_unified,
)
from .layout import LayoutDecision, LayoutMode, plan_layout
from .pane_builder import PaneBuilder, PaneState, compose_rows
from .row_renderer import DisplayRow, RowRenderer, fit_to_width, visual_width
from .static import render_side_by_side_from_edits
from .viewer_display import DiffViewer
from .viewer_state import FocusPane, ViewerState, ViewMode

__all__ = [
    "ClassifiedLine",
    "LineKind",
    "PaneSide",
    "classify_edits",
    "classify_file_diffs",
    "classify_unified",
    "LayoutDecision",
    "LayoutMode",
    "plan_layout",
    "PaneBuilder",
    "PaneState",
    "compose_rows",
    "DisplayRow",
    "RowRenderer",
    "fit_to_width",
    "visual_width",
    "render_side_by_side_from_edits",
    "DiffViewer",
    "FocusPane",
    "ViewerState",
    "ViewMode",
]
