# gitguy/cli/output_manager.py
# Output management implementation for quiet, normal, verbose & debug modes

# * Real implementation w/ Rich console output & optional plain-text file logging
# * Registered via set_output_manager() at CLI startup; the diff viewer receives it explicitly

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

from ..core.output import OutputLevel


class OutputManager:
    # Implements OutputInterface for the core registry
    # The log file is opened on initialize() & closed on end_session()/cleanup()

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: TextIO | None = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        log_file: Path | None = None,
        quiet: bool = False,
    ) -> None:
        self._level = OutputLevel.QUIET if quiet else requested_level
        self._session_start = time.time()
        self._setup_log_file(log_file)

    @property
    def log_file_path(self) -> Path | None:
        return self._log_file_path

    # OutputInterface implementation

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        if self._level >= OutputLevel.DEBUG:
            from ..gitguy_io.console import console

            console.print(f"[debug]\\[{category}][/] {msg}", markup=True, **kwargs)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level >= OutputLevel.VERBOSE:
            from ..gitguy_io.console import console

            prefix = f"[dim][{self._elapsed()}][/] [bold cyan]\\[{category}][/]"
            console.print(f"{prefix} {msg}", **kwargs)
            if detail:
                for line in detail.split("\n"):
                    console.print(f"  [dim]{line}[/]")
            # File logging (plain text)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
            if detail:
                for line in detail.split("\n"):
                    self._write_to_file(f"  {line}")

    def info(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            from ..gitguy_io.console import console

            console.print(msg, **kwargs)

    # warnings survive everything but --quiet & always reach the log file
    def warning(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            from ..gitguy_io.console import console

            console.print(f"[warning]Warning:[/] {msg}", **kwargs)
        self._write_to_file(f"[{self._elapsed()}] [WARNING] {msg}")

    def start_session(self) -> None:
        self._session_start = time.time()
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            self._write_to_file(f"{'='*60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()

        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError:
                # ! logging must never take the CLI down; continue w/out a file
                self._log_file_path = None
                self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.write(f"{msg}\n")
                self._log_file_handle.flush()
            except OSError:
                pass

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            try:
                self._log_file_handle.close()
            except OSError:
                pass
            self._log_file_handle = None
