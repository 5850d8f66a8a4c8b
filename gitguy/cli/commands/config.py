# gitguy/cli/commands/config.py
# Settings mgmt subcommands for GitGuy CLI (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

import typer

from ...config.settings import GitGuySettings, settings_manager
from ...gitguy_io.console import console
from ...ui.theming.styled_helpers import (
    format_setting_value,
    styled_setting_line,
    styled_success_line,
)
from ...ui.theming.theme_definitions import THEMES
from ...ui.theming.theme_engine import accent_gradient, styled_checkmark, success_gradient
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[gitguy.accent2]Manage GitGuy settings[/]"
)
app.add_typer(config_app, name="config")

# never echo the stored key back in full
SECRET_KEYS = {"api_key"}


# concise set of known keys for validation
def _known_keys() -> set[str]:
    return {f.name for f in fields(GitGuySettings)}


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _mask(key: str, value: Any) -> Any:
    if key in SECRET_KEYS and isinstance(value, str) and value:
        return value[:4] + "…" if len(value) > 8 else "…"
    return value


# * Print current settings & config path w/ styled output
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print(accent_gradient("Current Configuration"))
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()

    for key, value in data.items():
        formatted_value = format_setting_value(_mask(key, value))
        console.print(*styled_setting_line(key, formatted_value))

    console.print()
    console.print(
        "[dim]Use [/][gitguy.accent2]gitguy config --help[/][dim] to see available commands[/]"
    )


@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    """Show current settings when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    """Print one setting as JSON."""
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = _mask(key, settings_manager.get(key))
    shown = json.dumps(value, ensure_ascii=False)
    console.print(f"[gitguy.accent2]{shown}[/]", highlight=False)


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    """Set one setting (values are parsed as JSON when possible)."""
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    if key == "theme" and value not in THEMES:
        valid_themes = ", ".join(sorted(THEMES))
        raise typer.BadParameter(
            f"Invalid theme '{value}'. Valid themes: {valid_themes}"
        )

    # string settings keep the raw text ("123" stays a string for api_key)
    field_types = {f.name: f.type for f in fields(GitGuySettings)}
    coerced = value if field_types[key] in ("str", str) else _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except ValueError as e:
        raise typer.BadParameter(str(e))

    if key == "theme":
        from ...gitguy_io.console import refresh_theme

        refresh_theme()

    shown = json.dumps(_mask(key, coerced), ensure_ascii=False)
    console.print(*styled_success_line(f"Set {key}", f"[gitguy.accent2]{shown}[/]"))


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    """Reset all settings to defaults."""
    settings_manager.reset()
    console.print(styled_checkmark(), success_gradient("Reset settings to defaults"))


# * Show the configuration file path
@config_app.command()
def path() -> None:
    """Show the configuration file location."""
    console.print(
        f"[gitguy.accent2]{settings_manager.config_path}[/]", highlight=False, soft_wrap=True
    )


# * Explicit 'list' command to show current settings
@config_app.command(name="list")
def list_cmd() -> None:
    """Show all current settings."""
    _print_current_settings()
