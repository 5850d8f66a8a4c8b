# gitguy/ui/diff_viewer/viewer_renderer.py
# Frame rendering for the interactive diff viewer

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.rich_components import Group, RenderableType, Text
from .layout import DIVIDER, minimum_side_by_side_terminal_width, plan_layout
from .pane_builder import PaneBuilder
from .row_renderer import DisplayRow, RowRenderer
from .highlight import SyntaxHighlighter

if TYPE_CHECKING:
    from .classifier import ClassifiedLine
    from .viewer_state import ViewerState, Viewport

TITLE = "Git Diff Viewer"
NO_CHANGES_MESSAGE = "No changes to display"
HELP_TEXT = (
    "j/k: scroll | s: toggle side-by-side | h: toggle syntax highlighting | "
    "w: toggle whitespace | y: toggle scroll sync | tab: switch pane | q: quit"
)


def _flag(value: bool) -> str:
    return "true" if value else "false"


class ViewerRenderer:

    def __init__(
        self,
        lines: list["ClassifiedLine"],
        highlighter: SyntaxHighlighter | None = None,
    ):
        self.lines = lines
        self._highlighter = highlighter or SyntaxHighlighter()

    # ===== ROW BUILDING =====

    # * Recompute layout & rebuild both pane row sets & the unified rows
    def rebuild(self, state: "ViewerState") -> None:
        state.layout = plan_layout(state.width)
        renderer = RowRenderer(
            syntax_highlight=state.syntax_highlight, highlighter=self._highlighter
        )
        builder = PaneBuilder(renderer, show_whitespace=state.show_whitespace)

        if state.is_side_by_side:
            state.panes = builder.build(
                self.lines, state.layout.left_width, state.layout.right_width
            )
            state.unified_rows = []
        else:
            state.panes = builder.build([], 0, 0)
            state.unified_rows = builder.build_unified(
                self.lines, state.layout.total_width
            )

    # ===== FRAME =====

    def render_frame(self, state: "ViewerState") -> RenderableType:
        if state.err is not None:
            return Group(
                Text(f"Error parsing diff: {state.err}", style="bold red"),
                Text(""),
                Text("Press q to quit.", style="dim"),
            )

        parts: list[RenderableType] = [
            Text(TITLE, style="bold"),
            Text(self.subtitle(state), style="dim"),
            Text(""),
        ]
        parts.extend(self.body(state))
        parts.append(Text(""))
        parts.append(Text(HELP_TEXT, style="dim"))
        if state.is_auto_unified:
            parts.append(
                Text(
                    f"Terminal width: {state.width} (side-by-side requires "
                    f"≥{minimum_side_by_side_terminal_width()})",
                    style="yellow",
                )
            )
        return Group(*parts)

    def mode_label(self, state: "ViewerState") -> str:
        if state.is_side_by_side:
            return "side-by-side"
        if state.is_auto_unified:
            return "unified (auto) (requested: side-by-side)"
        return "unified"

    def subtitle(self, state: "ViewerState") -> str:
        subtitle = (
            f"Mode: {self.mode_label(state)} | "
            f"Syntax highlighting: {_flag(state.syntax_highlight)} | "
            f"Whitespace: {_flag(state.show_whitespace)}"
        )
        if state.is_side_by_side:
            subtitle += f" | Scroll sync: {_flag(state.scroll_sync)}"
        return subtitle + f" | Width: {state.width}"

    # visible rows for the current offsets; panes scroll independently when sync is off
    def body(self, state: "ViewerState") -> list[Text]:
        if state.is_side_by_side:
            if not state.panes.left and not state.panes.right:
                return [Text(NO_CHANGES_MESSAGE)]
            left = self._window(state.panes.left, state.left)
            right = self._window(state.panes.right, state.right)
            height = max(len(left), len(right))
            left += [self._blank(state.layout.left_width)] * (height - len(left))
            right += [self._blank(state.layout.right_width)] * (height - len(right))
            return [
                Text.assemble(left_row.text, DIVIDER, right_row.text)
                for left_row, right_row in zip(left, right)
            ]

        if not state.unified_rows:
            return [Text(NO_CHANGES_MESSAGE)]
        return [row.text for row in self._window(state.unified_rows, state.unified)]

    @staticmethod
    def _window(rows: list[DisplayRow], viewport: "Viewport") -> list[DisplayRow]:
        return rows[viewport.offset : viewport.offset + viewport.height]

    @staticmethod
    def _blank(width: int) -> DisplayRow:
        return DisplayRow(Text(" " * width))
