# gitguy/ui/diff_viewer/viewer_state.py
# State & state transitions for the interactive diff viewer

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .layout import LayoutDecision
from .pane_builder import PaneState
from .row_renderer import DisplayRow

# title, subtitle & spacer above the rows; spacer, help & width note below
CHROME_HEIGHT = 6


class ViewMode(Enum):
    UNIFIED = "unified"
    SIDE_BY_SIDE = "side-by-side"


class FocusPane(Enum):
    LEFT = "left"
    RIGHT = "right"


# * Scroll position over a fixed number of rows
@dataclass(slots=True)
class Viewport:
    offset: int = 0
    height: int = 1
    total: int = 0

    @property
    def max_offset(self) -> int:
        return max(0, self.total - self.height)

    def scroll_to(self, offset: int) -> None:
        self.offset = max(0, min(offset, self.max_offset))

    def scroll_by(self, delta: int) -> None:
        self.scroll_to(self.offset + delta)

    def resize(self, height: int, total: int) -> None:
        self.height = max(1, height)
        self.total = max(0, total)
        self.scroll_to(self.offset)


@dataclass
class ViewerState:

    # requested display mode; layout may still force unified
    mode: ViewMode = ViewMode.SIDE_BY_SIDE
    scroll_sync: bool = True
    syntax_highlight: bool = True
    show_whitespace: bool = False

    # terminal size
    width: int = 80
    height: int = 24

    # short-circuits the frame to an error message; only quit is accepted
    err: str | None = None

    focus: FocusPane = FocusPane.LEFT
    left: Viewport = field(default_factory=Viewport)
    right: Viewport = field(default_factory=Viewport)
    unified: Viewport = field(default_factory=Viewport)

    # render products, rebuilt whenever needs_render is set
    layout: LayoutDecision | None = None
    panes: PaneState = field(default_factory=PaneState)
    unified_rows: list[DisplayRow] = field(default_factory=list)
    needs_render: bool = True

    @property
    def is_side_by_side(self) -> bool:
        return (
            self.mode == ViewMode.SIDE_BY_SIDE
            and self.layout is not None
            and self.layout.is_side_by_side
        )

    # side-by-side was asked for but the layout downgraded it
    @property
    def is_auto_unified(self) -> bool:
        return self.mode == ViewMode.SIDE_BY_SIDE and not self.is_side_by_side

    @property
    def viewport_height(self) -> int:
        return max(1, self.height - CHROME_HEIGHT)

    @property
    def focused_viewport(self) -> Viewport:
        if not self.is_side_by_side:
            return self.unified
        return self.left if self.focus == FocusPane.LEFT else self.right


class ViewerStateManager:

    def __init__(self, state: ViewerState):
        self.state = state

    # ===== TOGGLES =====

    def toggle_mode(self) -> None:
        if self.state.mode == ViewMode.SIDE_BY_SIDE:
            self.state.mode = ViewMode.UNIFIED
        else:
            self.state.mode = ViewMode.SIDE_BY_SIDE
        self.state.needs_render = True

    def toggle_syntax_highlight(self) -> None:
        self.state.syntax_highlight = not self.state.syntax_highlight
        self.state.needs_render = True

    def toggle_whitespace(self) -> None:
        self.state.show_whitespace = not self.state.show_whitespace
        self.state.needs_render = True

    # only affects future scroll events; nothing to re-render
    def toggle_scroll_sync(self) -> None:
        if self.state.is_side_by_side:
            self.state.scroll_sync = not self.state.scroll_sync

    def switch_focus(self) -> None:
        if self.state.is_side_by_side:
            self.state.focus = (
                FocusPane.RIGHT if self.state.focus == FocusPane.LEFT else FocusPane.LEFT
            )

    # ===== RESIZE =====

    def resize(self, width: int, height: int) -> None:
        self.state.width = width
        self.state.height = height
        self.state.needs_render = True

    # ===== SCROLLING =====

    # * Apply new pane offsets for one event, then sync when enabled
    # * if both panes changed in the same event left wins: right is overwritten by left
    def scroll_panes(self, left: int | None = None, right: int | None = None) -> None:
        before_left = self.state.left.offset
        before_right = self.state.right.offset
        if left is not None:
            self.state.left.scroll_to(left)
        if right is not None:
            self.state.right.scroll_to(right)

        if not (self.state.scroll_sync and self.state.is_side_by_side):
            return
        if self.state.left.offset != before_left:
            self.state.right.scroll_to(self.state.left.offset)
        elif self.state.right.offset != before_right:
            self.state.left.scroll_to(self.state.right.offset)

    def scroll_by(self, delta: int) -> None:
        if not self.state.is_side_by_side:
            self.state.unified.scroll_by(delta)
        elif self.state.focus == FocusPane.LEFT:
            self.scroll_panes(left=self.state.left.offset + delta)
        else:
            self.scroll_panes(right=self.state.right.offset + delta)

    def scroll_page(self, direction: int) -> None:
        self.scroll_by(direction * self.state.viewport_height)

    def scroll_half_page(self, direction: int) -> None:
        self.scroll_by(direction * max(1, self.state.viewport_height // 2))

    def scroll_to_top(self) -> None:
        self.scroll_by(-self.state.focused_viewport.offset)

    def scroll_to_bottom(self) -> None:
        viewport = self.state.focused_viewport
        self.scroll_by(viewport.max_offset - viewport.offset)

    # ===== RENDER PRODUCTS =====

    # refit viewports after rows were rebuilt; offsets are kept where possible
    def apply_rows(self) -> None:
        height = self.state.viewport_height
        self.state.left.resize(height, len(self.state.panes.left))
        self.state.right.resize(height, len(self.state.panes.right))
        self.state.unified.resize(height, len(self.state.unified_rows))
        self.state.needs_render = False
