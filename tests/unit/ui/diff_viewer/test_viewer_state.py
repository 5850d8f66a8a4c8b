# tests/unit/ui/diff_viewer/test_viewer_state.py
# Unit tests for viewer state transitions & scroll synchronization

import pytest

from gitguy.ui.core.rich_components import Text
from gitguy.ui.diff_viewer.layout import plan_layout
from gitguy.ui.diff_viewer.pane_builder import PaneState
from gitguy.ui.diff_viewer.row_renderer import DisplayRow
from gitguy.ui.diff_viewer.viewer_state import (
    FocusPane,
    ViewerState,
    ViewerStateManager,
    ViewMode,
    Viewport,
)


def _rows(count):
    return [DisplayRow(Text("")) for _ in range(count)]


@pytest.fixture
def side_by_side():
    state = ViewerState(width=200, height=30)
    state.layout = plan_layout(200)
    state.panes = PaneState(left=_rows(100), right=_rows(100))
    manager = ViewerStateManager(state)
    manager.apply_rows()
    return state, manager


@pytest.fixture
def unified():
    state = ViewerState(mode=ViewMode.UNIFIED, width=200, height=30)
    state.layout = plan_layout(80)
    state.unified_rows = _rows(50)
    manager = ViewerStateManager(state)
    manager.apply_rows()
    return state, manager


class TestViewport:

    # * Verify offsets clamp to [0, total - height]
    def test_clamping(self):
        viewport = Viewport(height=10, total=25)
        viewport.scroll_by(100)
        assert viewport.offset == 15
        viewport.scroll_by(-100)
        assert viewport.offset == 0

    # * Verify resize keeps the offset inside the new bounds
    def test_resize_clamps(self):
        viewport = Viewport(offset=40, height=10, total=50)
        viewport.resize(10, 20)
        assert viewport.offset == 10

    # * Verify short content has no scroll room
    def test_short_content(self):
        viewport = Viewport(height=10, total=3)
        viewport.scroll_by(5)
        assert viewport.offset == 0


class TestScrollSync:

    # * Verify a left scroll is mirrored onto the right pane
    def test_left_scroll_syncs_right(self, side_by_side):
        state, manager = side_by_side
        manager.scroll_panes(left=12)
        assert (state.left.offset, state.right.offset) == (12, 12)

    # * Verify a right scroll is mirrored onto the left pane
    def test_right_scroll_syncs_left(self, side_by_side):
        state, manager = side_by_side
        manager.scroll_panes(right=5)
        assert (state.left.offset, state.right.offset) == (5, 5)

    # * Verify the tie-break: when both panes change in one event, left wins
    def test_both_changed_left_wins(self, side_by_side):
        state, manager = side_by_side
        manager.scroll_panes(left=10, right=30)
        assert (state.left.offset, state.right.offset) == (10, 10)

    # * Verify only the changed pane drives sync when the other is unchanged
    def test_right_change_w_unchanged_left(self, side_by_side):
        state, manager = side_by_side
        manager.scroll_panes(left=0, right=30)
        assert (state.left.offset, state.right.offset) == (30, 30)

    # * Verify panes scroll independently once sync is off
    def test_sync_disabled(self, side_by_side):
        state, manager = side_by_side
        manager.toggle_scroll_sync()
        assert state.scroll_sync is False
        manager.scroll_panes(left=7)
        assert (state.left.offset, state.right.offset) == (7, 0)

    # * Verify focus decides which pane a scroll key moves
    def test_focus_routes_scroll(self, side_by_side):
        state, manager = side_by_side
        manager.toggle_scroll_sync()
        manager.switch_focus()
        assert state.focus == FocusPane.RIGHT
        manager.scroll_by(3)
        assert (state.left.offset, state.right.offset) == (0, 3)

    # * Verify synced scrolling is clamped at the bottom
    def test_scroll_to_bottom(self, side_by_side):
        state, manager = side_by_side
        manager.scroll_to_bottom()
        assert state.left.offset == 100 - state.viewport_height
        assert state.right.offset == state.left.offset
        manager.scroll_to_top()
        assert (state.left.offset, state.right.offset) == (0, 0)


class TestToggles:

    # * Verify mode, highlight & whitespace toggles request a re-render
    def test_render_toggles(self, side_by_side):
        state, manager = side_by_side
        for toggle in (
            manager.toggle_mode,
            manager.toggle_syntax_highlight,
            manager.toggle_whitespace,
        ):
            state.needs_render = False
            toggle()
            assert state.needs_render is True
        assert state.mode == ViewMode.UNIFIED
        assert state.syntax_highlight is False
        assert state.show_whitespace is True

    # * Verify toggling scroll sync never re-renders
    def test_scroll_sync_toggle_no_render(self, side_by_side):
        state, manager = side_by_side
        assert state.needs_render is False
        manager.toggle_scroll_sync()
        assert state.needs_render is False

    # * Verify resize always requests a re-render
    def test_resize(self, side_by_side):
        state, manager = side_by_side
        manager.resize(90, 20)
        assert (state.width, state.height) == (90, 20)
        assert state.needs_render is True


class TestUnified:

    # * Verify unified mode scrolls its single viewport & ignores sync/focus keys
    def test_unified_scroll(self, unified):
        state, manager = unified
        manager.scroll_page(1)
        assert state.unified.offset == state.viewport_height
        manager.toggle_scroll_sync()
        manager.switch_focus()
        assert state.scroll_sync is True
        assert state.focus == FocusPane.LEFT

    # * Verify side-by-side requested on a narrow layout counts as auto-unified
    def test_auto_unified(self):
        state = ViewerState(mode=ViewMode.SIDE_BY_SIDE, width=80)
        state.layout = plan_layout(80)
        assert not state.is_side_by_side
        assert state.is_auto_unified
        assert state.focused_viewport is state.unified

    # * Verify half-page scrolling
    def test_half_page(self, unified):
        state, manager = unified
        manager.scroll_half_page(1)
        assert state.unified.offset == state.viewport_height // 2
