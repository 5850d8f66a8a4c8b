# gitguy/ai/types.py
# Shared types for AI clients & functionality

from __future__ import annotations

from dataclasses import dataclass


# * Result object for AI generation operations
@dataclass(slots=True)
class GenerateResult:
    success: bool  # indicates if generation was successful
    commit_message: str = ""  # single-line conventional commit message
    pr_description: str = ""  # markdown PR body
    raw_text: str = ""  # provider raw text (for debugging)
    error: str = ""  # error message on failure


# * Raw provider reply plus call metadata, before parsing
@dataclass(slots=True)
class APICallContext:
    raw_text: str  # raw response text from provider
    provider_name: str  # provider ID
    model: str  # resolved model id used for the call
