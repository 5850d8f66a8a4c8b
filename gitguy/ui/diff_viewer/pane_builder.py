# gitguy/ui/diff_viewer/pane_builder.py
# Pane building: classified lines -> balanced left/right row sequences (grouped run alignment)

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.rich_components import Text
from .classifier import ClassifiedLine, LineKind, PaneSide
from .layout import DIVIDER
from .row_renderer import DisplayRow, RowRenderer


# * Left (original) & right (revised) rows; row i of each pane shares a terminal line
@dataclass(slots=True)
class PaneState:
    left: list[DisplayRow] = field(default_factory=list)
    right: list[DisplayRow] = field(default_factory=list)

    def __len__(self) -> int:
        return max(len(self.left), len(self.right))

    @property
    def is_balanced(self) -> bool:
        return len(self.left) == len(self.right)


class PaneBuilder:
    def __init__(self, renderer: RowRenderer, show_whitespace: bool = False):
        self.renderer = renderer
        self.show_whitespace = show_whitespace

    # whitespace-only changes are noise when whitespace display is off; blank lines never are
    def is_suppressed(self, line: ClassifiedLine) -> bool:
        return not self.show_whitespace and line.is_change and line.is_whitespace_only

    def visible_lines(self, lines: list[ClassifiedLine]) -> list[ClassifiedLine]:
        return [line for line in lines if not self.is_suppressed(line)]

    # ===== SIDE-BY-SIDE =====

    def build(
        self, lines: list[ClassifiedLine], left_width: int, right_width: int
    ) -> PaneState:
        panes = PaneState()
        visible = self.visible_lines(lines)
        index = 0
        while index < len(visible):
            line = visible[index]

            if line.is_header:
                self._append_block(
                    panes,
                    [self.renderer.render_header(line, left_width)],
                    [self.renderer.render_header(line, right_width)],
                    left_width,
                    right_width,
                )
                index += 1

            elif line.kind == LineKind.DELETE:
                # deletion run, then the addition run directly after it (if any)
                deletes_end = self._run_end(visible, index, LineKind.DELETE)
                adds_end = self._run_end(visible, deletes_end, LineKind.ADD)
                left_rows = self._render_run(
                    visible[index:deletes_end], left_width, PaneSide.LEFT
                )
                right_rows = self._render_run(
                    visible[deletes_end:adds_end], right_width, PaneSide.RIGHT
                )
                self._append_block(panes, left_rows, right_rows, left_width, right_width)
                index = adds_end

            elif line.kind == LineKind.ADD:
                # standalone addition run: original side gets blank rows
                adds_end = self._run_end(visible, index, LineKind.ADD)
                right_rows = self._render_run(
                    visible[index:adds_end], right_width, PaneSide.RIGHT
                )
                self._append_block(panes, [], right_rows, left_width, right_width)
                index = adds_end

            else:
                # context wraps independently per pane; the block pads the shorter side
                self._append_block(
                    panes,
                    self.renderer.render(line, left_width, PaneSide.LEFT),
                    self.renderer.render(line, right_width, PaneSide.RIGHT),
                    left_width,
                    right_width,
                )
                index += 1

        self._balance(panes, left_width, right_width)
        return panes

    # ===== UNIFIED =====

    def build_unified(self, lines: list[ClassifiedLine], width: int) -> list[DisplayRow]:
        rows: list[DisplayRow] = []
        for line in self.visible_lines(lines):
            rows.extend(self.renderer.render(line, width, PaneSide.LEFT))
        return rows

    # ===== HELPERS =====

    @staticmethod
    def _run_end(lines: list[ClassifiedLine], start: int, kind: LineKind) -> int:
        end = start
        while end < len(lines) and lines[end].kind == kind:
            end += 1
        return end

    def _render_run(
        self, run: list[ClassifiedLine], width: int, side: PaneSide
    ) -> list[DisplayRow]:
        rows: list[DisplayRow] = []
        for line in run:
            rows.extend(self.renderer.render(line, width, side))
        return rows

    # both sides of a block start on the same row; shorter side padded w/ blanks
    def _append_block(
        self,
        panes: PaneState,
        left_rows: list[DisplayRow],
        right_rows: list[DisplayRow],
        left_width: int,
        right_width: int,
    ) -> None:
        height = max(len(left_rows), len(right_rows))
        panes.left.extend(left_rows)
        panes.left.extend(
            self.renderer.blank(left_width) for _ in range(height - len(left_rows))
        )
        panes.right.extend(right_rows)
        panes.right.extend(
            self.renderer.blank(right_width) for _ in range(height - len(right_rows))
        )

    def _balance(self, panes: PaneState, left_width: int, right_width: int) -> None:
        while len(panes.left) < len(panes.right):
            panes.left.append(self.renderer.blank(left_width))
        while len(panes.right) < len(panes.left):
            panes.right.append(self.renderer.blank(right_width))


# * Join pane rows pairwise w/ the divider into full terminal rows
def compose_rows(panes: PaneState) -> list[Text]:
    return [
        Text.assemble(left.text, DIVIDER, right.text)
        for left, right in zip(panes.left, panes.right)
    ]
