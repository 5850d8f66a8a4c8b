# gitguy/gitguy_io/console.py
# Shared rich Console for the whole application

# Architecture notes:
# - Console is created bare at import time; the theme is pushed by the CLI callback
# - _ConsoleProxy lets tests & CLI modes swap the Console w/out breaking module-level imports
# - Tests swap in a recording Console via _set_console()

from __future__ import annotations

from typing import Any

from rich.console import Console


# proxy forwarding every attribute to the current Console instance
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()


# * Get the underlying Console instance
def get_console() -> Console:
    # handle both proxy & direct Console (e.g., when patched in tests)
    if hasattr(console, "_get_console"):
        return console._get_console()
    return console  # type: ignore[return-value]


# * Re-push the theme after a settings change
def refresh_theme() -> None:
    from ..ui.theming.console_theme import refresh_theme as _refresh_theme

    _refresh_theme()


__all__ = [
    "console",
    "get_console",
    "refresh_theme",
]
