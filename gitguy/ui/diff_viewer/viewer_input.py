# gitguy/ui/diff_viewer/viewer_input.py
# Key handling for the interactive diff viewer

from __future__ import annotations

from readchar import key

from .viewer_state import ViewerState, ViewerStateManager

QUIT_KEYS = ("q", key.CTRL_C)


class ViewerInputHandler:

    def __init__(self, state: ViewerState, state_manager: ViewerStateManager):
        self.state = state
        self.manager = state_manager

    # returns False when the viewer should close
    def handle_key(self, k: str) -> bool:
        if k in QUIT_KEYS:
            return False
        if self.state.err is not None:
            return True

        if k == "s":
            self.manager.toggle_mode()
        elif k == "h":
            self.manager.toggle_syntax_highlight()
        elif k == "w":
            self.manager.toggle_whitespace()
        elif k == "y":
            self.manager.toggle_scroll_sync()
        elif k == key.TAB:
            self.manager.switch_focus()
        else:
            self._handle_scroll_key(k)
        return True

    def _handle_scroll_key(self, k: str) -> None:
        if k in (key.DOWN, "j"):
            self.manager.scroll_by(1)
        elif k in (key.UP, "k"):
            self.manager.scroll_by(-1)
        elif k in (key.PAGE_DOWN, "f", key.SPACE):
            self.manager.scroll_page(1)
        elif k in (key.PAGE_UP, "b"):
            self.manager.scroll_page(-1)
        elif k == "d":
            self.manager.scroll_half_page(1)
        elif k == "u":
            self.manager.scroll_half_page(-1)
        elif k in (key.HOME, "g"):
            self.manager.scroll_to_top()
        elif k in (key.END, "G"):
            self.manager.scroll_to_bottom()
