# gitguy/ui/theming/theme_engine.py
# Theme engine: settings-aware accent colors, gradients & the rich Theme

from __future__ import annotations

from ..core.rich_components import Theme, Text
from .theme_definitions import THEMES, DEFAULT_THEME


def _current_theme_name() -> str:
    from ...config.settings import settings_manager

    name = getattr(settings_manager.load(), "theme", DEFAULT_THEME)
    return name if name in THEMES else DEFAULT_THEME


# descriptor resolving a palette slot against the active theme on every access
class _ThemeColor:
    def __init__(self, index: int) -> None:
        self._index = index

    def __get__(self, obj: object, objtype: type | None = None) -> str:
        return THEMES[_current_theme_name()][self._index]


# * Color constants; accents follow the configured theme, status colors are fixed
class GitGuyColors:
    ACCENT_PRIMARY = _ThemeColor(0)
    ACCENT_LIGHT = _ThemeColor(1)
    ACCENT_SECONDARY = _ThemeColor(2)
    ACCENT_MEDIUM = _ThemeColor(3)
    ACCENT_DEEP = _ThemeColor(4)

    SUCCESS_BRIGHT = "#10b981"  # emerald green
    SUCCESS_MEDIUM = "#059669"
    SUCCESS_DIM = "#047857"

    WARNING = "#ffaa00"  # amber
    ERROR = "#ff4444"  # red
    INFO = "#4488ff"  # blue
    DIM = "#aaaaaa"
    DEBUG = "#00b5b5"  # dim cyan

    CHECKMARK = SUCCESS_BRIGHT

    @classmethod
    def gradient(cls) -> list[str]:
        return [
            cls.ACCENT_PRIMARY,
            cls.ACCENT_LIGHT,
            cls.ACCENT_SECONDARY,
            cls.ACCENT_MEDIUM,
            cls.ACCENT_DEEP,
        ]


def _hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    hex_color = hex_color.lstrip("#")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def _lerp_color(a_hex: str, b_hex: str, t: float) -> str:
    a = _hex_to_rgb(a_hex)
    b = _hex_to_rgb(b_hex)
    r, g, bl = (int(round(x + (y - x) * t)) for x, y in zip(a, b))
    return f"#{r:02x}{g:02x}{bl:02x}"


# * Per-character gradient across the given color stops
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    if colors is None:
        colors = GitGuyColors.gradient()
    if not text or not colors:
        return Text(text)
    if len(colors) < 2 or len(text) == 1:
        return Text(text, style=colors[0])

    result = Text()
    stops = len(colors) - 1
    for i, char in enumerate(text):
        position = i / (len(text) - 1) * stops
        index = min(int(position), stops - 1)
        result.append(char, style=_lerp_color(colors[index], colors[index + 1], position - index))
    return result


def success_gradient(text: str) -> Text:
    return natural_gradient(
        text,
        [GitGuyColors.SUCCESS_BRIGHT, GitGuyColors.SUCCESS_MEDIUM, GitGuyColors.SUCCESS_DIM],
    )


def accent_gradient(text: str) -> Text:
    return natural_gradient(
        text,
        [GitGuyColors.ACCENT_PRIMARY, GitGuyColors.ACCENT_SECONDARY, GitGuyColors.ACCENT_DEEP],
    )


# * Rich Theme w/ the semantic names used in markup ("gitguy.accent", "warning" ...)
def get_gitguy_theme() -> Theme:
    return Theme(
        {
            "success": GitGuyColors.SUCCESS_BRIGHT,
            "warning": GitGuyColors.WARNING,
            "error": GitGuyColors.ERROR,
            "info": GitGuyColors.INFO,
            "dim": GitGuyColors.DIM,
            "debug": GitGuyColors.DEBUG,
            "gitguy.accent": GitGuyColors.ACCENT_PRIMARY,
            "gitguy.accent2": GitGuyColors.ACCENT_SECONDARY,
            "gitguy.accent_deep": GitGuyColors.ACCENT_DEEP,
            "gitguy.title": f"bold {GitGuyColors.ACCENT_PRIMARY}",
            "gitguy.checkmark": GitGuyColors.CHECKMARK,
            "gitguy.selected": f"reverse bold {GitGuyColors.ACCENT_PRIMARY}",
        }
    )


def styled_checkmark() -> Text:
    return Text("✓", style=GitGuyColors.CHECKMARK)


def styled_arrow() -> Text:
    return Text("->", style=GitGuyColors.ACCENT_SECONDARY)


def styled_bullet() -> Text:
    return Text("•", style=GitGuyColors.ACCENT_SECONDARY)
