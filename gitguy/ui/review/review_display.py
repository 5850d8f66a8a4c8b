# gitguy/ui/review/review_display.py
# Interactive review session: pick refs, inspect the diff, generate & save the PR

from __future__ import annotations

from typing import TYPE_CHECKING

from readchar import readkey

from ...core.exceptions import GitGuyError
from ...gitguy_io.clipboard import copy_to_clipboard
from ...gitguy_io.console import get_console
from ..core.resize import on_terminal_resize
from ..core.rich_components import Live, RenderableType
from .review_input import ReviewInputHandler
from .review_renderer import ReviewRenderer
from .review_state import (
    GenerateCallback,
    LoadDiffCallback,
    PendingAction,
    ReviewState,
    ReviewStateManager,
    SavePRCallback,
)

if TYPE_CHECKING:
    from ...git.repo import RefInfo


# * Orchestrates the review session: state, rendering, input & pending work
# * Git, AI & file work is injected as callbacks so the session stays testable
class ReviewSession:
    def __init__(
        self,
        refs: list["RefInfo"],
        load_diff: LoadDiffCallback,
        generate: GenerateCallback,
        save_pr: SavePRCallback,
        width: int | None = None,
        height: int | None = None,
    ):
        size = get_console().size
        self._state = ReviewState(
            refs=refs,
            width=width if width is not None else size.width,
            height=height if height is not None else size.height,
        )
        self._state_manager = ReviewStateManager(self._state)
        self._renderer = ReviewRenderer()
        self._input_handler = ReviewInputHandler(self._state, self._state_manager)

        self._load_diff = load_diff
        self._generate = generate
        self._save_pr = save_pr

    # ===== STABLE COMPONENT ACCESSORS (read-only) =====

    @property
    def state(self) -> ReviewState:
        return self._state

    @property
    def renderer(self) -> ReviewRenderer:
        return self._renderer

    # ===== PUBLIC API =====

    def render_screen(self) -> RenderableType:
        return self._renderer.render_screen(self._state)

    # Returns False to exit loop.
    def handle_key(self, k: str) -> bool:
        return self._input_handler.handle_key(k)

    # * Run whatever the last key requested; failures become the error screen
    def process_pending(self) -> None:
        action = self._state_manager.take_pending()
        if action is None:
            return
        state = self._state
        current, incoming = state.selected_current, state.selected_incoming
        if current is None or incoming is None:
            return
        try:
            if action == PendingAction.LOAD_DIFF:
                preview = self._load_diff(current, incoming, state.width)
                self._state_manager.show_diff(preview)
            elif action == PendingAction.GENERATE:
                if state.preview is None or state.preview.is_empty:
                    state.status = "No changes to generate from"
                    return
                result = self._generate(state.preview.unified_text)
                if not result.success:
                    self._state_manager.set_error(result.error)
                    return
                self._state_manager.show_result(result)
            elif action == PendingAction.SAVE_PR:
                if state.result is None:
                    return
                path = self._save_pr(state.result, current, incoming)
                self._state_manager.mark_saved(path)
            elif action == PendingAction.COPY_COMMIT:
                if state.result is None:
                    return
                copy_to_clipboard(state.result.commit_message)
                self._state_manager.mark_copied()
        except GitGuyError as e:
            self._state_manager.set_error(str(e))

    def _sync_terminal_size(self) -> None:
        size = get_console().size
        if (size.width, size.height) != (self._state.width, self._state.height):
            self._state_manager.resize(size.width, size.height)

    # * Resize signal: adopt the new size & redraw without waiting for a key
    def _redraw_for_resize(self, live: Live) -> None:
        size = get_console().size
        self._state_manager.resize(size.width, size.height)
        live.update(self.render_screen(), refresh=True)

    def run(self) -> None:
        try:
            with Live(
                self.render_screen(),
                console=get_console(),
                screen=True,
                auto_refresh=False,
            ) as live, on_terminal_resize(lambda: self._redraw_for_resize(live)):
                while not self._state.is_complete:
                    k = readkey()
                    if not self.handle_key(k):
                        break

                    if self._state.pending is not None:
                        live.update(
                            self._renderer.render_loading(self._state.pending),
                            refresh=True,
                        )
                        self.process_pending()

                    self._sync_terminal_size()
                    live.update(self.render_screen(), refresh=True)
        except KeyboardInterrupt:
            pass
