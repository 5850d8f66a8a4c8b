# gitguy/ui/theming/console_theme.py
# Push/refresh the gitguy Theme on the shared console

from __future__ import annotations

from rich.theme import ThemeStackError

from ...gitguy_io.console import console


# * Push the theme built from current settings
def initialize_theme() -> None:
    from .theme_engine import get_gitguy_theme

    console.push_theme(get_gitguy_theme())


# * Replace a previously pushed theme (after `config set theme`)
def refresh_theme() -> None:
    from .theme_engine import get_gitguy_theme

    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_gitguy_theme())
