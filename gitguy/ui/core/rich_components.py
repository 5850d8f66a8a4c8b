# gitguy/ui/core/rich_components.py
# Centralized Rich component imports & themed builders

from __future__ import annotations

from typing import Any

# Core Rich components
from rich.console import Console, RenderableType, Group
from rich.text import Text
from rich.theme import Theme

# Layout & display components
from rich.panel import Panel
from rich.table import Table
from rich.live import Live
from rich.padding import Padding
from rich.spinner import Spinner


# * Themed Panel builder - consistent styling across UI
def themed_panel(
    content: Any,
    title: str | None = None,
    theme_colors: list[str] | None = None,
    padding: tuple[int, int] = (0, 1),
    **kwargs,
) -> Panel:
    # lazy import to avoid circular dependency
    from ..theming.theme_engine import GitGuyColors

    colors = theme_colors or GitGuyColors.gradient()
    formatted_title = f"[bold]{title}[/]" if title else None
    return Panel(
        content,
        title=formatted_title,
        title_align=kwargs.pop("title_align", "left"),
        border_style=kwargs.pop("border_style", colors[2]),
        padding=padding,
        **kwargs,
    )


__all__ = [
    "Console",
    "RenderableType",
    "Group",
    "Text",
    "Theme",
    "Panel",
    "Table",
    "Live",
    "Padding",
    "Spinner",
    "themed_panel",
]
