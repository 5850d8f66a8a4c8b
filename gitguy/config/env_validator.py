# gitguy/config/env_validator.py
# Centralized environment variable registry for provider credentials

import os
from typing import Optional

OPENROUTER_ENV_VAR = "OPENROUTER_API_KEY"

# * Required environment variables by provider ID
REQUIRED_ENV_VARS: dict[str, str] = {
    "openrouter": OPENROUTER_ENV_VAR,
}


def get_required_env_var(provider: str) -> Optional[str]:
    """Get the required environment variable name for a provider."""
    return REQUIRED_ENV_VARS.get(provider)


def validate_provider_env(provider: str) -> bool:
    """Check if required environment variable is set for provider.

    Returns True if:
    - Provider has no env requirement
    - Provider's required env var is set & non-empty
    """
    var_name = REQUIRED_ENV_VARS.get(provider)
    if var_name is None:
        return True
    return bool(os.getenv(var_name))


def get_missing_env_message(provider: str) -> str:
    """Generate error message for missing API key."""
    var_name = REQUIRED_ENV_VARS.get(provider)
    if var_name is None:
        return f"Provider '{provider}' does not require an API key."
    return (
        f"Missing {var_name} in environment or .env "
        "(or pass --api-key / run 'gitguy config set api_key ...')"
    )
