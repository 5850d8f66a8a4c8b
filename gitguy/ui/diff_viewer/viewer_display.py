# gitguy/ui/diff_viewer/viewer_display.py
# Interactive full-screen diff viewer w/ synchronized side-by-side scrolling

from __future__ import annotations

from typing import Iterable

from readchar import readkey

from ...core.exceptions import DiffError
from ...core.output import OutputInterface
from ...diffing.edits import EditOperation, apply_edits
from ...diffing.file_diff import FileDiff
from ...diffing.unified import DEFAULT_CONTEXT
from ...gitguy_io.console import get_console
from ..core.resize import on_terminal_resize
from ..core.rich_components import Live, RenderableType
from .classifier import (
    ClassifiedLine,
    classify_edits,
    classify_file_diffs,
    classify_unified,
)
from .viewer_input import ViewerInputHandler
from .viewer_renderer import ViewerRenderer
from .viewer_state import ViewerState, ViewerStateManager, ViewMode


# * Orchestrates one viewing session: state, key handling, rendering & the Live loop
# * The logger handle is owned for the session: started here, ended in close()
class DiffViewer:
    def __init__(
        self,
        lines: list[ClassifiedLine],
        *,
        logger: OutputInterface,
        side_by_side: bool = True,
        syntax_highlight: bool = True,
        show_whitespace: bool = False,
        scroll_sync: bool = True,
        width: int | None = None,
        height: int | None = None,
        err: str | None = None,
    ):
        size = get_console().size
        self._state = ViewerState(
            mode=ViewMode.SIDE_BY_SIDE if side_by_side else ViewMode.UNIFIED,
            scroll_sync=scroll_sync,
            syntax_highlight=syntax_highlight,
            show_whitespace=show_whitespace,
            width=width if width is not None else size.width,
            height=height if height is not None else size.height,
            err=err,
        )
        self._state_manager = ViewerStateManager(self._state)
        self._renderer = ViewerRenderer(lines)
        self._input_handler = ViewerInputHandler(self._state, self._state_manager)

        self._logger = logger
        self._closed = False
        self._logger.start_session()
        self._logger.debug(
            f"Viewer opened: {len(lines)} lines, {self._state.width}x{self._state.height}",
            category="VIEWER",
        )

    # ===== CONSTRUCTORS =====

    @classmethod
    def from_edits(
        cls,
        edits: list[EditOperation],
        original: str,
        filename: str,
        *,
        logger: OutputInterface,
        context: int = DEFAULT_CONTEXT,
        **options,
    ) -> "DiffViewer":
        try:
            apply_edits(original, edits)
            lines = classify_edits(edits, original, filename, context)
        except DiffError as e:
            return cls([], logger=logger, err=str(e), **options)
        return cls(lines, logger=logger, **options)

    @classmethod
    def from_file_diffs(
        cls,
        file_diffs: Iterable[FileDiff],
        *,
        logger: OutputInterface,
        context: int = DEFAULT_CONTEXT,
        **options,
    ) -> "DiffViewer":
        try:
            lines = classify_file_diffs(file_diffs, context)
        except DiffError as e:
            return cls([], logger=logger, err=str(e), **options)
        return cls(lines, logger=logger, **options)

    @classmethod
    def from_unified(
        cls, text: str, *, logger: OutputInterface, **options
    ) -> "DiffViewer":
        return cls(classify_unified(text), logger=logger, **options)

    # ===== STABLE COMPONENT ACCESSORS (read-only) =====

    @property
    def state(self) -> ViewerState:
        return self._state

    @property
    def renderer(self) -> ViewerRenderer:
        return self._renderer

    # ===== PUBLIC API =====

    def render_screen(self) -> RenderableType:
        if self._state.err is None and self._state.needs_render:
            self._renderer.rebuild(self._state)
            self._state_manager.apply_rows()
            self._logger.debug(
                f"Rebuilt rows: mode={self._renderer.mode_label(self._state)}, "
                f"width={self._state.width}",
                category="VIEWER",
            )
        return self._renderer.render_frame(self._state)

    # Returns False to exit loop.
    def handle_key(self, k: str) -> bool:
        return self._input_handler.handle_key(k)

    def resize(self, width: int, height: int) -> None:
        self._state_manager.resize(width, height)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._logger.end_session()

    # * Poll the terminal size after each key; covers platforms w/out SIGWINCH
    def _sync_terminal_size(self) -> None:
        size = get_console().size
        if (size.width, size.height) != (self._state.width, self._state.height):
            self.resize(size.width, size.height)

    # * Resize signal: adopt the new size & redraw without waiting for a key
    def _redraw_for_resize(self, live: Live) -> None:
        size = get_console().size
        self.resize(size.width, size.height)
        live.update(self.render_screen(), refresh=True)

    def run(self) -> None:
        try:
            with Live(
                self.render_screen(),
                console=get_console(),
                screen=True,
                auto_refresh=False,
            ) as live, on_terminal_resize(lambda: self._redraw_for_resize(live)):
                while True:
                    k = readkey()
                    if not self.handle_key(k):
                        break
                    self._sync_terminal_size()
                    live.update(self.render_screen(), refresh=True)
        except KeyboardInterrupt:
            pass
        finally:
            self.close()
