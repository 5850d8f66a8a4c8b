# gitguy/ai/models.py
# OpenRouter model catalog & alias resolution

from __future__ import annotations

from ..core.verbose import vlog_debug

DEFAULT_MODEL_ALIAS = "deepseek-v3"

# * Short names accepted on the CLI & in config -> OpenRouter model ids
MODEL_ALIASES: dict[str, str] = {
    "deepseek-v3": "deepseek/deepseek-chat-v3-0324:free",
    "deepseek-r1": "deepseek/deepseek-r1:free",
    "deepseek-r1-0528": "deepseek/deepseek-r1-0528:free",
    "kimi-k2": "moonshotai/kimi-k2:free",
}

SUPPORTED_MODELS: list[str] = list(MODEL_ALIASES.values())
DEFAULT_MODEL = MODEL_ALIASES[DEFAULT_MODEL_ALIAS]


# * Resolve an alias or full id; anything unrecognized falls back to the default model
def resolve_model(name: str | None) -> str:
    if not name:
        return DEFAULT_MODEL
    if name in MODEL_ALIASES:
        return MODEL_ALIASES[name]
    if name in SUPPORTED_MODELS:
        return name
    vlog_debug("AI", f"Unknown model '{name}', using {DEFAULT_MODEL}")
    return DEFAULT_MODEL


def is_known_model(name: str) -> bool:
    return name in MODEL_ALIASES or name in SUPPORTED_MODELS


def model_help_text() -> str:
    return ", ".join(MODEL_ALIASES)
