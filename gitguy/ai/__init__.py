# gitguy/ai/__init__.py
# Commit message & PR description generation via OpenRouter

from .client import BaseClient, OpenRouterClient
from .types import GenerateResult

__all__ = ["BaseClient", "OpenRouterClient", "GenerateResult"]
