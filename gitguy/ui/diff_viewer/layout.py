# gitguy/ui/diff_viewer/layout.py
# Layout planning: unified vs side-by-side & per-pane content widths from terminal width

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# 10% of the terminal is held back for border/scrollbar reflow in imprecise emulators
USABLE_WIDTH_NUMERATOR = 9
USABLE_WIDTH_DENOMINATOR = 10
MARGIN_WIDTH = 4
MIN_SIDE_BY_SIDE_WIDTH = 100
DIVIDER_WIDTH = 3
MIN_COLUMN_WIDTH = 40

DIVIDER = " │ "


class LayoutMode(Enum):
    UNIFIED = "unified"
    SIDE_BY_SIDE = "side-by-side"


# * Layout for one render cycle; right_width is 0 in unified mode
@dataclass(frozen=True, slots=True)
class LayoutDecision:
    mode: LayoutMode
    left_width: int
    right_width: int

    @property
    def is_side_by_side(self) -> bool:
        return self.mode == LayoutMode.SIDE_BY_SIDE

    @property
    def total_width(self) -> int:
        if self.is_side_by_side:
            return self.left_width + DIVIDER_WIDTH + self.right_width
        return self.left_width


# * Decide layout for a terminal width; recomputed on every resize & toggle
def plan_layout(terminal_width: int) -> LayoutDecision:
    # floor(width * 0.90) in integer arithmetic
    usable = max(terminal_width, 0) * USABLE_WIDTH_NUMERATOR // USABLE_WIDTH_DENOMINATOR
    available = max(usable - MARGIN_WIDTH, 0)

    if available < MIN_SIDE_BY_SIDE_WIDTH:
        return LayoutDecision(LayoutMode.UNIFIED, available, 0)

    content = available - DIVIDER_WIDTH
    left = content // 2
    right = content - left
    if left < MIN_COLUMN_WIDTH or right < MIN_COLUMN_WIDTH:
        return LayoutDecision(LayoutMode.UNIFIED, available, 0)
    return LayoutDecision(LayoutMode.SIDE_BY_SIDE, left, right)


# * Smallest terminal width that yields a side-by-side layout
def minimum_side_by_side_terminal_width() -> int:
    needed = MIN_SIDE_BY_SIDE_WIDTH + MARGIN_WIDTH
    # ceil(needed / 0.9)
    return -(-needed * USABLE_WIDTH_DENOMINATOR // USABLE_WIDTH_NUMERATOR)
