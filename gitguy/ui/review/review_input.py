# gitguy/ui/review/review_input.py
# Input handling for the interactive review session

from __future__ import annotations

from readchar import key

from .review_state import (
    PendingAction,
    ReviewScreen,
    ReviewState,
    ReviewStateManager,
)

QUIT_KEYS = ("q", key.CTRL_C)


class ReviewInputHandler:

    def __init__(self, state: ReviewState, state_manager: ReviewStateManager):
        self.state = state
        self.manager = state_manager

    # returns False when the session should end
    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            self.manager.complete()
            return False
        # errors are terminal; only quit is accepted
        if self.state.err is not None:
            return True

        if self.state.screen == ReviewScreen.REF_SELECTION:
            self._handle_selection_key(k)
        elif self.state.screen == ReviewScreen.DIFF:
            self._handle_diff_key(k)
        else:
            self._handle_result_key(k)
        return True

    def _handle_selection_key(self, k: str) -> None:
        if k == key.TAB:
            self.manager.switch_side()
        elif k in (key.ENTER, key.SPACE):
            self.manager.select_current_item()
        elif k == "r":
            self.manager.reset_active_selection()
        elif k == "R":
            self.manager.reset_all_selections()
        elif k in (key.UP, "k"):
            self.manager.move_cursor(-1)
        elif k in (key.DOWN, "j"):
            self.manager.move_cursor(1)
        elif k in (key.PAGE_UP,):
            self.manager.move_cursor(-self.state.page_height)
        elif k in (key.PAGE_DOWN,):
            self.manager.move_cursor(self.state.page_height)

    def _handle_diff_key(self, k: str) -> None:
        if k == "b":
            self.manager.back_to_selection()
        elif k == "g":
            self.manager.request(PendingAction.GENERATE)
        else:
            self._handle_scroll_key(k)

    def _handle_result_key(self, k: str) -> None:
        if k == "d":
            self.manager.back_to_diff()
        elif k == "c":
            self.manager.request(PendingAction.COPY_COMMIT)
        elif k == "p":
            self.manager.request(PendingAction.SAVE_PR)
        else:
            self._handle_scroll_key(k)

    def _handle_scroll_key(self, k: str) -> None:
        if k in (key.DOWN, "j"):
            self.manager.scroll(1)
        elif k in (key.UP, "k"):
            self.manager.scroll(-1)
        elif k in (key.PAGE_DOWN, "f", key.SPACE):
            self.manager.scroll(self.state.page_height)
        elif k in (key.PAGE_UP,):
            self.manager.scroll(-self.state.page_height)
