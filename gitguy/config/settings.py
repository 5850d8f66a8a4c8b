# gitguy/config/settings.py
# Configuration management for GitGuy: model, PR output, viewer defaults & config directory

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, cast

import typer

from ..core.exceptions import JSONParsingError, MissingAPIKeyError
from ..gitguy_io.generics import read_json_safe, write_json_safe
from .env_validator import OPENROUTER_ENV_VAR, get_missing_env_message

APP_DIR_NAME = "gitguy"
CONFIG_FILENAME = "config.json"

VALID_THEMES = {"deep_blue", "terminal_green", "amber", "magenta"}


# * Per-user config directory; XDG on POSIX, %APPDATA% on Windows
def config_dir() -> Path:
    if os.name == "nt":
        appdata = os.getenv("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / APP_DIR_NAME
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_DIR_NAME


# * Default settings dataclass for GitGuy w/ model, output & viewer configuration
@dataclass
class GitGuySettings:
    # OpenRouter model alias (see gitguy/ai/models.py)
    model: str = "deepseek-v3"
    # stored key; env var & --api-key flag take precedence
    api_key: str = ""

    # PR output; {{ID}} is replaced w/ a random number per run
    out_pr: str = "PR_{{ID}}.md"
    pr_template: str = ""

    # diff viewer defaults
    side_by_side: bool = True
    syntax_highlight: bool = True
    show_whitespace: bool = False
    context_lines: int = 3

    # ref selection
    recent_commits: int = 10

    # theme setting
    theme: str = "deep_blue"

    # JSON-lines log of every OpenRouter call
    api_logging: bool = True

    def __post_init__(self) -> None:
        for name in ("model", "api_key", "out_pr", "pr_template", "theme"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(
                    f"{name} must be a string, got {type(value).__name__}"
                )

        if not self.model.strip():
            raise ValueError("model must not be empty")
        if not self.out_pr.strip():
            raise ValueError("out_pr must not be empty")

        # strict bool validation (no coercion)
        for name in ("side_by_side", "syntax_highlight", "show_whitespace", "api_logging"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )

        # bool is an int subclass; reject it explicitly
        if (
            not isinstance(self.context_lines, int)
            or isinstance(self.context_lines, bool)
            or self.context_lines < 0
        ):
            raise ValueError(
                f"context_lines must be a non-negative integer, got {self.context_lines}"
            )
        if (
            not isinstance(self.recent_commits, int)
            or isinstance(self.recent_commits, bool)
            or self.recent_commits < 1
        ):
            raise ValueError(
                f"recent_commits must be a positive integer, got {self.recent_commits}"
            )

        if self.theme not in VALID_THEMES:
            raise ValueError(f"theme must be one of {VALID_THEMES}, got '{self.theme}'")

    @property
    def pr_template_path(self) -> Path | None:
        return Path(self.pr_template).expanduser() if self.pr_template else None


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self._config_path = config_path
        self._settings: GitGuySettings | None = None

    # resolved lazily so XDG_CONFIG_HOME changes are honored until a path is pinned
    @property
    def config_path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return config_dir() / CONFIG_FILENAME

    @config_path.setter
    def config_path(self, value: Optional[Path]) -> None:
        self._config_path = value

    # load settings from file or return defaults
    def load(self) -> GitGuySettings:
        if self._settings is not None:
            return self._settings

        path = self.config_path
        if path.exists():
            try:
                data = read_json_safe(path)
                self._settings = GitGuySettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {path}: {e}")
                typer.echo("Using default settings")
                self._settings = GitGuySettings()
        else:
            self._settings = GitGuySettings()

        return self._settings

    # save setting to file
    def save(self, settings: GitGuySettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validated through the dataclass
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        data = asdict(settings)
        data[key] = value
        self.save(GitGuySettings(**data))

    # reset to default settings
    def reset(self) -> None:
        self.save(GitGuySettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[GitGuySettings] = None
) -> GitGuySettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for GitGuySettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, GitGuySettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()


# * Resolve the OpenRouter key: explicit flag, then environment, then config file
def resolve_api_key(
    flag_value: Optional[str] = None, settings: Optional[GitGuySettings] = None
) -> str:
    if flag_value:
        return flag_value
    env_value = os.getenv(OPENROUTER_ENV_VAR)
    if env_value:
        return env_value
    settings = settings or settings_manager.load()
    if settings.api_key:
        return settings.api_key
    raise MissingAPIKeyError(
        get_missing_env_message("openrouter"), "openrouter", OPENROUTER_ENV_VAR
    )
