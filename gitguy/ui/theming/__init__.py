# gitguy/ui/theming/__init__.py
# Theming utilities: palettes, console theme & styled helpers

from .theme_definitions import THEMES, DEFAULT_THEME
from .theme_engine import (
    GitGuyColors,
    natural_gradient,
    success_gradient,
    accent_gradient,
    get_gitguy_theme,
    styled_checkmark,
    styled_arrow,
    styled_bullet,
)
from .console_theme import initialize_theme, refresh_theme

__all__ = [
    "THEMES",
    "DEFAULT_THEME",
    "GitGuyColors",
    "natural_gradient",
    "success_gradient",
    "accent_gradient",
    "get_gitguy_theme",
    "styled_checkmark",
    "styled_arrow",
    "styled_bullet",
    "initialize_theme",
    "refresh_theme",
]
