# gitguy/core/verbose.py
# Verbose logging helpers delegating to the registered OutputManager (AI calls, git commands, file I/O)

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a CLI invocation
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    debug: bool = False,
) -> None:
    if enabled and debug:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(requested_level=requested_level, log_file=log_file)
    set_output_manager(manager)


# * Check if verbose logging is enabled
def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log AI API call (before making the call)
def vlog_ai_request(provider: str, model: str, prompt_length: int) -> None:
    detail = f"Model: {model}, Prompt: {prompt_length:,} chars"
    get_output_manager().verbose(f"Request to {provider}", "AI", detail)


# * Log AI API response
def vlog_ai_response(
    provider: str,
    model: str,
    response_length: int,
    success: bool,
    duration_ms: float | None = None,
    error: str | None = None,
) -> None:
    duration_str = f" in {duration_ms:.0f}ms" if duration_ms else ""
    if success:
        detail = f"Model: {model}, Response: {response_length:,} chars"
        get_output_manager().verbose(
            f"Response from {provider}{duration_str}", "AI", detail
        )
    else:
        detail = f"Model: {model}, Error: {error}"
        get_output_manager().verbose(
            f"[red]Error from {provider}[/]{duration_str}", "AI", detail
        )


# * Log a git subprocess invocation
def vlog_git(args: list[str], output_length: int | None = None) -> None:
    size_str = f" ({output_length:,} chars)" if output_length is not None else ""
    get_output_manager().verbose(f"git {' '.join(args)}{size_str}", "GIT")


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log pipeline stage start
def vlog_stage(stage: str, description: str | None = None) -> None:
    if description:
        get_output_manager().verbose(f"{stage}: {description}", "STAGE")
    else:
        get_output_manager().verbose(stage, "STAGE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Debug-level only logging
def vlog_debug(category: str, message: str) -> None:
    get_output_manager().debug(message, category)
