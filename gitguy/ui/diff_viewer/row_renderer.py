# gitguy/ui/diff_viewer/row_renderer.py
# Row rendering: highlight, prefix, wrap & exact-width enforcement for one classified line

from __future__ import annotations

from dataclasses import dataclass

from ...gitguy_io.console import get_console
from ..core.rich_components import Text
from .classifier import ClassifiedLine, LineKind, PaneSide
from .highlight import SyntaxHighlighter

LINE_NUMBER_WIDTH = 4
MIN_WRAP_WIDTH = 10
TAB_SIZE = 4

MARKERS = {
    LineKind.DELETE: " │ -",
    LineKind.ADD: " │ +",
    LineKind.CONTEXT: " │  ",
}

# 256-color palette styles for line numbers & content backgrounds
NUMBER_STYLES = {
    LineKind.DELETE: "color(196) on color(52)",
    LineKind.ADD: "color(46) on color(22)",
    LineKind.CONTEXT: "color(241)",
}
BACKGROUND_STYLES = {
    LineKind.DELETE: "on color(52)",
    LineKind.ADD: "on color(22)",
    LineKind.CONTEXT: "",
}
HEADER_STYLES = {
    LineKind.HUNK_HEADER: "bold color(6)",
    LineKind.FILE_HEADER: "bold color(33)",
}


# * One terminal row, post-wrap & post-pad
@dataclass(slots=True)
class DisplayRow:
    text: Text

    # printable cell width; style spans never count
    @property
    def visual_width(self) -> int:
        return self.text.cell_len

    @property
    def plain(self) -> str:
        return self.text.plain


# * Truncate or space-pad a Text to exactly `width` cells (returns a copy)
def fit_to_width(text: Text, width: int) -> Text:
    fitted = text.copy()
    fitted.truncate(max(width, 0), overflow="crop", pad=True)
    return fitted


def visual_width(text: Text | str) -> int:
    if isinstance(text, Text):
        return text.cell_len
    return Text.from_ansi(text).cell_len


class RowRenderer:
    def __init__(
        self,
        syntax_highlight: bool = False,
        highlighter: SyntaxHighlighter | None = None,
    ):
        self.syntax_highlight = syntax_highlight
        self._highlighter = highlighter or SyntaxHighlighter()

    # ===== PUBLIC API =====

    def render(
        self, line: ClassifiedLine, width: int, side: PaneSide = PaneSide.LEFT
    ) -> list[DisplayRow]:
        if line.is_header:
            return [self.render_header(line, width)]

        prefix = self._prefix(line, side)
        prefix_width = prefix.cell_len
        content = self._content(line)
        content_width = width - prefix_width

        # near-zero widths would wrap into single-character rows; truncate instead
        if content_width <= MIN_WRAP_WIDTH:
            return [self._finish(Text.assemble(prefix, content), width, line.kind)]

        segments = list(content.wrap(get_console(), content_width, overflow="fold"))
        if not segments:
            segments = [Text("")]

        rows: list[DisplayRow] = []
        for index, segment in enumerate(segments):
            lead = prefix if index == 0 else Text(" " * prefix_width)
            rows.append(self._finish(Text.assemble(lead, segment), width, line.kind))
        return rows

    def render_header(self, line: ClassifiedLine, width: int) -> DisplayRow:
        text = Text(line.text.expandtabs(TAB_SIZE), style=HEADER_STYLES[line.kind])
        return DisplayRow(fit_to_width(text, width))

    def blank(self, width: int) -> DisplayRow:
        return DisplayRow(Text(" " * max(width, 0)))

    # ===== ROW PARTS =====

    def _prefix(self, line: ClassifiedLine, side: PaneSide) -> Text:
        number = line.number_for(side)
        if number is None:
            number_text = " " * LINE_NUMBER_WIDTH
        else:
            number_text = f"{number:>{LINE_NUMBER_WIDTH}d}"
        return Text(number_text + MARKERS[line.kind], style=NUMBER_STYLES[line.kind])

    # highlighting runs on raw content before any diff styling is layered on
    def _content(self, line: ClassifiedLine) -> Text:
        raw = line.text.expandtabs(TAB_SIZE)
        if self.syntax_highlight and raw:
            highlighted = self._highlighter.highlight(raw, line.filename)
            if highlighted != raw:
                text = Text.from_ansi(highlighted)
                # escape-code miscount guard: visible text must match the raw content
                if text.plain == raw:
                    return text
        return Text(raw)

    # diff background sits under highlight colors & padding; row is exactly `width` cells
    def _finish(self, row: Text, width: int, kind: LineKind) -> DisplayRow:
        row.style = BACKGROUND_STYLES[kind]
        return DisplayRow(fit_to_width(row, width))
