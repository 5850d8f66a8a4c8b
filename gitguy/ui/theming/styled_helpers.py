# gitguy/ui/theming/styled_helpers.py
# Pre-composed styling helpers for common CLI output lines

from __future__ import annotations

import json
from typing import Any

from .theme_engine import styled_checkmark, styled_arrow, success_gradient, styled_bullet


def styled_success_line(label: str, value: str | None = None) -> list:
    """Checkmark + gradient label [+ arrow + value], for console.print(*result)."""
    parts: list[Any] = [styled_checkmark(), success_gradient(label)]
    if value is not None:
        parts.extend([styled_arrow(), value])
    return parts


def styled_setting_line(key: str, value: str) -> list:
    """Bullet + key + arrow + value, for console.print(*result)."""
    return [styled_bullet(), f"[bold white]{key}[/]", "[gitguy.accent2]->", value]


def format_setting_value(value: Any) -> str:
    if value is None:
        return "[dim]null[/]"
    if isinstance(value, str):
        return f'[gitguy.accent2]"{value}"[/]'
    if isinstance(value, bool):
        return f"[gitguy.accent2]{str(value).lower()}[/]"
    if isinstance(value, (int, float)):
        return f"[gitguy.accent2]{value}[/]"
    return f"[gitguy.accent2]{json.dumps(value)}[/]"
