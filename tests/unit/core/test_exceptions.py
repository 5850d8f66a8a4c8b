# tests/unit/core/test_exceptions.py
# Unit tests for the exception hierarchy & error formatting

from pathlib import Path

from gitguy.core.exceptions import (
    ConfigurationError,
    DiffError,
    EditApplyError,
    FileWriteError,
    GitError,
    GitGuyError,
    MissingAPIKeyError,
    NotARepositoryError,
    RateLimitError,
    format_error_message,
)


# * Verify families share the GitGuyError base
def test_hierarchy():
    assert issubclass(EditApplyError, DiffError)
    assert issubclass(NotARepositoryError, GitError)
    assert issubclass(MissingAPIKeyError, ConfigurationError)
    for error in (DiffError, GitError, ConfigurationError, FileWriteError):
        assert issubclass(error, GitGuyError)


# * Verify extra context is kept on the instances
def test_context_attributes():
    assert EditApplyError("overlap", 12).offset == 12
    assert FileWriteError("nope", "out/PR.md").path == Path("out/PR.md")
    limited = RateLimitError("slow down", "openrouter", retry_after=30)
    assert (limited.status_code, limited.retry_after) == (429, 30)
    assert "retry_after=30" in repr(limited)


# * Verify the markup used for CLI error lines
def test_format_error_message():
    assert format_error_message("Git Error", "boom") == "[red]Git Error:[/] boom"
