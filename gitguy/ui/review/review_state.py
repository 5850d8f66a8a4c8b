# gitguy/ui/review/review_state.py
# State management for the interactive review session (ref selection -> diff -> result)

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from ...ai.types import GenerateResult
    from ...git.repo import RefInfo


class ReviewScreen(Enum):
    REF_SELECTION = "ref_selection"
    DIFF = "diff"
    RESULT = "result"


class RefSide(Enum):
    CURRENT = "current"
    INCOMING = "incoming"


# work requested by a key press; run by the display loop w/ a loading frame
class PendingAction(Enum):
    LOAD_DIFF = "load_diff"
    GENERATE = "generate"
    SAVE_PR = "save_pr"
    COPY_COMMIT = "copy_commit"


# * Diff for a ref pair: terminal text for display & unified text for the model
@dataclass(slots=True)
class DiffPreview:
    display_text: str
    unified_text: str

    @property
    def is_empty(self) -> bool:
        return not self.unified_text.strip()


# callback types supplied by the review command
LoadDiffCallback = Callable[["RefInfo", "RefInfo", int], DiffPreview]
GenerateCallback = Callable[[str], "GenerateResult"]
SavePRCallback = Callable[["GenerateResult", "RefInfo", "RefInfo"], Path]


@dataclass
class ReviewState:

    refs: list["RefInfo"] = field(default_factory=list)
    screen: ReviewScreen = ReviewScreen.REF_SELECTION

    # ref selection
    active_side: RefSide = RefSide.CURRENT
    current_cursor: int = 0
    incoming_cursor: int = 0
    selected_current: "RefInfo | None" = None
    selected_incoming: "RefInfo | None" = None

    # diff & result screens
    preview: DiffPreview | None = None
    diff_offset: int = 0
    result: "GenerateResult | None" = None
    result_offset: int = 0
    saved_path: Path | None = None

    # terminal size
    width: int = 80
    height: int = 24

    pending: PendingAction | None = None
    status: str = ""
    err: str | None = None
    is_complete: bool = False

    @property
    def is_ready(self) -> bool:
        return self.selected_current is not None and self.selected_incoming is not None

    @property
    def missing_selection(self) -> str:
        missing = []
        if self.selected_current is None:
            missing.append("current ref")
        if self.selected_incoming is None:
            missing.append("incoming ref")
        return " and ".join(missing)

    @property
    def page_height(self) -> int:
        # title, spacer, spacer, status & help
        return max(1, self.height - 6)

    def cursor(self, side: RefSide) -> int:
        return self.current_cursor if side == RefSide.CURRENT else self.incoming_cursor

    @property
    def diff_lines(self) -> list[str]:
        if self.preview is None:
            return []
        return self.preview.display_text.split("\n")

    @property
    def result_lines(self) -> list[str]:
        if self.result is None:
            return []
        content = (
            f"COMMIT MESSAGE:\n{self.result.commit_message}\n\n"
            f"PR DESCRIPTION:\n{self.result.pr_description}"
        )
        return content.split("\n")


class ReviewStateManager:

    def __init__(self, state: ReviewState):
        self.state = state

    # ===== REF SELECTION =====

    def switch_side(self) -> None:
        self.state.active_side = (
            RefSide.INCOMING
            if self.state.active_side == RefSide.CURRENT
            else RefSide.CURRENT
        )

    def move_cursor(self, delta: int) -> None:
        if not self.state.refs:
            return
        last = len(self.state.refs) - 1
        if self.state.active_side == RefSide.CURRENT:
            self.state.current_cursor = max(0, min(last, self.state.current_cursor + delta))
        else:
            self.state.incoming_cursor = max(
                0, min(last, self.state.incoming_cursor + delta)
            )

    # selects the ref under the active cursor; both chosen -> diff is requested
    def select_current_item(self) -> None:
        if not self.state.refs:
            return
        side = self.state.active_side
        ref = self.state.refs[self.state.cursor(side)]
        if side == RefSide.CURRENT:
            self.state.selected_current = ref
        else:
            self.state.selected_incoming = ref
        if self.state.is_ready:
            self.state.pending = PendingAction.LOAD_DIFF

    def reset_active_selection(self) -> None:
        if self.state.active_side == RefSide.CURRENT:
            self.state.selected_current = None
        else:
            self.state.selected_incoming = None

    def reset_all_selections(self) -> None:
        self.state.selected_current = None
        self.state.selected_incoming = None

    # ===== SCREENS =====

    def show_diff(self, preview: DiffPreview) -> None:
        self.state.preview = preview
        self.state.diff_offset = 0
        self.state.screen = ReviewScreen.DIFF

    def back_to_selection(self) -> None:
        self.state.screen = ReviewScreen.REF_SELECTION
        self.state.status = ""

    def show_result(self, result: "GenerateResult") -> None:
        self.state.result = result
        self.state.result_offset = 0
        self.state.saved_path = None
        self.state.screen = ReviewScreen.RESULT

    def back_to_diff(self) -> None:
        self.state.screen = ReviewScreen.DIFF
        self.state.status = ""

    def mark_saved(self, path: Path) -> None:
        self.state.saved_path = path
        self.state.status = f"PR description written to {path}"

    def mark_copied(self) -> None:
        self.state.status = "Commit message copied to clipboard"

    def request(self, action: PendingAction) -> None:
        self.state.pending = action

    def take_pending(self) -> PendingAction | None:
        action, self.state.pending = self.state.pending, None
        return action

    def set_error(self, message: str) -> None:
        self.state.err = message
        self.state.pending = None

    def complete(self) -> None:
        self.state.is_complete = True

    # ===== SCROLLING =====

    def scroll(self, delta: int) -> None:
        if self.state.screen == ReviewScreen.DIFF:
            limit = max(0, len(self.state.diff_lines) - self.state.page_height)
            self.state.diff_offset = max(0, min(limit, self.state.diff_offset + delta))
        elif self.state.screen == ReviewScreen.RESULT:
            limit = max(0, len(self.state.result_lines) - self.state.page_height)
            self.state.result_offset = max(
                0, min(limit, self.state.result_offset + delta)
            )

    def resize(self, width: int, height: int) -> None:
        self.state.width = width
        self.state.height = height
        self.scroll(0)
