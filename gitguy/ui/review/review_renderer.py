# gitguy/ui/review/review_renderer.py
# Rendering for the interactive review session screens

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.rich_components import (
    Group,
    Padding,
    RenderableType,
    Spinner,
    Table,
    Text,
    themed_panel,
)
from .review_state import PendingAction, RefSide, ReviewScreen

if TYPE_CHECKING:
    from ...git.repo import RefInfo
    from .review_state import ReviewState

SELECTION_HELP = (
    "Tab: Switch sides | Enter/Space: Select | r: Reset current | R: Reset all | q: Quit"
)
DIFF_HELP = "j/k: Scroll | g: Generate commit & PR | b: Back | q: Quit"
RESULT_HELP = "j/k: Scroll | c: Copy commit | p: Save PR | d: Back to diff | q: Quit"

LOADING_MESSAGES = {
    PendingAction.LOAD_DIFF: "Generating diff...",
    PendingAction.GENERATE: "Generating commit message & PR description...",
    PendingAction.SAVE_PR: "Saving PR description...",
    PendingAction.COPY_COMMIT: "Copying commit message...",
}

# panel border (2) + selected line (1)
LIST_CHROME = 3


class ReviewRenderer:

    def render_screen(self, state: "ReviewState") -> RenderableType:
        if state.err is not None:
            return Group(
                Text(f"Error: {state.err}", style="bold red"),
                Text(""),
                Text("Press q to quit.", style="dim"),
            )
        if state.screen == ReviewScreen.REF_SELECTION:
            return self.render_selection(state)
        if state.screen == ReviewScreen.DIFF:
            return self.render_diff(state)
        return self.render_result(state)

    def render_loading(self, action: PendingAction) -> RenderableType:
        return Padding(
            Spinner("dots", text=Text(LOADING_MESSAGES[action], style="gitguy.accent")),
            (1, 2),
        )

    # ===== REF SELECTION =====

    def render_selection(self, state: "ReviewState") -> RenderableType:
        grid = Table.grid(expand=True, padding=(0, 2))
        grid.add_column(ratio=1)
        grid.add_column(ratio=1)
        grid.add_row(
            self._ref_panel(state, RefSide.CURRENT),
            self._ref_panel(state, RefSide.INCOMING),
        )

        if state.is_ready:
            status = Text(
                "✓ Ready to generate diff! Press Enter to continue.", style="bold green"
            )
        else:
            status = Text(f"Select {state.missing_selection} to continue", style="dim")

        return Group(
            Text("Select Git References", style="gitguy.title"),
            Text(""),
            grid,
            Text(""),
            status,
            Text(SELECTION_HELP, style="dim"),
        )

    def _ref_panel(self, state: "ReviewState", side: RefSide) -> RenderableType:
        is_active = state.active_side == side
        selected = (
            state.selected_current if side == RefSide.CURRENT else state.selected_incoming
        )
        title = "Current Ref" if side == RefSide.CURRENT else "Incoming Ref"

        rows: list[Text] = []
        if selected is not None:
            rows.append(Text(f"✓ Selected: {selected.name}", style="bold green"))
        else:
            rows.append(Text("No ref selected", style="dim"))

        height = max(1, state.page_height - LIST_CHROME)
        cursor = state.cursor(side)
        start = max(0, min(cursor - height // 2, len(state.refs) - height))
        for index, ref in enumerate(state.refs[start : start + height], start=start):
            rows.append(self._ref_line(ref, index == cursor and is_active))

        if not state.refs:
            rows.append(Text("No refs found", style="dim"))

        if is_active:
            return themed_panel(Group(*rows), title=title)
        return themed_panel(Group(*rows), title=title, border_style="bright_black")

    def _ref_line(self, ref: "RefInfo", highlighted: bool) -> Text:
        marker = "› " if highlighted else "  "
        line = Text(marker)
        line.append(ref.name, style="gitguy.selected" if highlighted else "")
        line.append(f"  {ref.hash[:8]} ({ref.kind})", style="dim")
        line.no_wrap = True
        line.overflow = "ellipsis"
        return line

    # ===== DIFF & RESULT =====

    def render_diff(self, state: "ReviewState") -> RenderableType:
        lines = state.diff_lines
        window = lines[state.diff_offset : state.diff_offset + state.page_height]
        body = [self._ansi_line(line) for line in window]
        return Group(
            Text("Git Diff", style="gitguy.title"),
            Text(""),
            *body,
            Text(""),
            Text(state.status, style="yellow") if state.status else Text(""),
            Text(DIFF_HELP, style="dim"),
        )

    def render_result(self, state: "ReviewState") -> RenderableType:
        lines = state.result_lines
        window = lines[state.result_offset : state.result_offset + state.page_height]
        return Group(
            Text("Generated Commit & PR", style="gitguy.title"),
            Text(""),
            *[Text(line) for line in window],
            Text(""),
            Text(state.status, style="green") if state.status else Text(""),
            Text(RESULT_HELP, style="dim"),
        )

    @staticmethod
    def _ansi_line(line: str) -> Text:
        text = Text.from_ansi(line)
        text.no_wrap = True
        text.overflow = "crop"
        return text
