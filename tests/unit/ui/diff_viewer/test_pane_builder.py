# tests/unit/ui/diff_viewer/test_pane_builder.py
# Unit tests for pane building: grouped run alignment, balancing & whitespace suppression

import pytest

from gitguy.diffing.edits import diff_strings
from gitguy.ui.diff_viewer.classifier import ClassifiedLine, LineKind, classify_edits
from gitguy.ui.diff_viewer.layout import DIVIDER
from gitguy.ui.diff_viewer.pane_builder import PaneBuilder, compose_rows
from gitguy.ui.diff_viewer.row_renderer import RowRenderer


def _builder(show_whitespace=False):
    return PaneBuilder(RowRenderer(), show_whitespace=show_whitespace)


def _lines(original, revised, filename="f.txt"):
    return classify_edits(diff_strings(original, revised), original, filename)


def _index_of(rows, needle):
    return next(i for i, row in enumerate(rows) if needle in row.plain)


class TestGroupedRuns:

    # * Verify scenario: deletion & addition runs start on the same row & panes balance
    def test_runs_aligned(self):
        lines = _lines(
            "line 1\nline 2\nline 3", "line 1\nmodified line 2\nline 3\nline 4"
        )
        panes = _builder().build(lines, 50, 50)

        assert panes.is_balanced
        assert len(panes.left) == 7
        assert _index_of(panes.left, "line 2") == _index_of(panes.right, "modified line 2")
        # shorter deletion run padded w/ a blank row opposite "line 4"
        assert panes.left[_index_of(panes.right, "line 4")].plain.strip() == ""

    # * Verify standalone additions leave the original side blank
    def test_standalone_additions(self):
        lines = _lines("a\nb\n", "a\nnew 1\nnew 2\nb\n")
        panes = _builder().build(lines, 45, 45)
        first = _index_of(panes.right, "new 1")
        assert panes.left[first].plain.strip() == ""
        assert panes.left[first + 1].plain.strip() == ""
        assert panes.is_balanced

    # * Verify standalone deletions leave the revised side blank
    def test_standalone_deletions(self):
        lines = _lines("a\nold 1\nold 2\nb\n", "a\nb\n")
        panes = _builder().build(lines, 45, 45)
        first = _index_of(panes.left, "old 1")
        assert panes.right[first].plain.strip() == ""
        assert panes.is_balanced

    # * Verify context lines appear on both sides at the same row
    def test_context_on_both_sides(self):
        lines = _lines("keep\nchange\n", "keep\nchanged\n")
        panes = _builder().build(lines, 40, 40)
        assert _index_of(panes.left, "keep") == _index_of(panes.right, "keep")

    # * Verify headers are routed to both panes
    def test_headers_on_both_sides(self):
        lines = _lines("x\n", "y\n")
        panes = _builder().build(lines, 40, 40)
        assert panes.left[0].plain.startswith("--- a/f.txt")
        assert panes.right[0].plain.startswith("--- a/f.txt")


class TestBalancing:

    # * Verify wrapped rows inside a run are padded on the shorter side
    def test_wrapped_run_balanced(self):
        lines = [
            ClassifiedLine(LineKind.DELETE, "long " * 40, 1, None),
            ClassifiedLine(LineKind.ADD, "short", None, 1),
        ]
        panes = _builder().build(lines, 40, 40)
        assert len(panes.left) > 1
        assert panes.is_balanced

    # * Verify uneven pane widths still balance & keep exact widths
    @pytest.mark.parametrize(
        "original,revised",
        [
            ("", "a\nb\nc\n"),
            ("a\nb\nc\n", ""),
            ("one\ntwo\nthree\n", "uno\ndos\n"),
            ("x" * 300 + "\n", "y\n" * 5),
            ("".join(f"row {i}\n" for i in range(40)), "".join(f"row {i}\n" for i in range(0, 40, 3))),
        ],
    )
    def test_always_balanced(self, original, revised):
        panes = _builder().build(_lines(original, revised), 48, 49)
        assert panes.is_balanced
        assert all(row.visual_width == 48 for row in panes.left)
        assert all(row.visual_width == 49 for row in panes.right)


class TestWhitespaceSuppression:

    # * Verify whitespace-only changes hide while blank lines & context stay
    def test_suppressed_when_hidden(self):
        lines = [
            ClassifiedLine(LineKind.DELETE, "    ", 1, None),
            ClassifiedLine(LineKind.ADD, "\t", None, 1),
            ClassifiedLine(LineKind.ADD, "", None, 2),
            ClassifiedLine(LineKind.CONTEXT, "  ", 2, 3),
        ]
        visible = _builder().visible_lines(lines)
        assert visible == lines[2:]

    # * Verify everything is kept when whitespace display is on
    def test_kept_when_shown(self):
        lines = [
            ClassifiedLine(LineKind.DELETE, "    ", 1, None),
            ClassifiedLine(LineKind.ADD, "", None, 1),
        ]
        assert _builder(show_whitespace=True).visible_lines(lines) == lines

    # * Verify suppressed lines keep later numbering intact
    def test_numbering_survives_suppression(self):
        lines = _lines("a\n  \nb\n", "a\n\t\nB\n")
        panes = _builder().build(lines, 40, 40)
        assert not any("\t" in row.plain for row in panes.right)
        assert panes.right[_index_of(panes.right, "B")].plain.startswith("   3 │ +B")


class TestUnifiedAndCompose:

    # * Verify unified rows keep one row per short line at the full width
    def test_build_unified(self):
        lines = _lines("a\nb\n", "a\nc\n")
        rows = _builder().build_unified(lines, 60)
        assert len(rows) == len(lines)
        assert all(row.visual_width == 60 for row in rows)

    # * Verify composed rows join both panes w/ the divider
    def test_compose_rows(self):
        panes = _builder().build(_lines("a\n", "b\n"), 40, 41)
        composed = compose_rows(panes)
        assert len(composed) == len(panes.left)
        assert all(row.cell_len == 40 + len(DIVIDER) + 41 for row in composed)
        assert DIVIDER in composed[-1].plain
