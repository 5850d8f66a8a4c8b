# gitguy/core/exceptions.py
# Custom exception hierarchy for gitguy (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for gitguy
class GitGuyError(Exception):
    pass


# * Diff production & parsing errors
class DiffError(GitGuyError):
    pass


# * Edit script could not be applied to the original text (unordered, overlapping, out of range)
class EditApplyError(DiffError):
    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, offset={self.offset!r})"


# * Git repository access errors
class GitError(GitGuyError):
    pass


# * Current directory is not inside a git work tree
class NotARepositoryError(GitError):
    pass


# * Nothing staged or unstaged to show
class NoChangesError(GitError):
    pass


# * AI-related exceptions
class AIError(GitGuyError):
    pass


# * Provider-specific error (API errors, connection failures)
class ProviderError(AIError):
    def __init__(self, message: str, provider: str, status_code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"provider={self.provider!r}, status_code={self.status_code!r})"
        )


# * API rate limit exceeded
class RateLimitError(ProviderError):
    def __init__(self, message: str, provider: str, retry_after: int | None = None):
        super().__init__(message, provider, status_code=429)
        self.retry_after = retry_after

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"provider={self.provider!r}, retry_after={self.retry_after!r})"
        )


# * Model reply did not follow the COMMIT:/PR: format
class ResponseParseError(AIError):
    pass


# * Configuration errors
class ConfigurationError(GitGuyError):
    pass


# * Required API key not found
class MissingAPIKeyError(ConfigurationError):
    def __init__(self, message: str, provider: str, env_var: str):
        super().__init__(message)
        self.provider = provider
        self.env_var = env_var

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"provider={self.provider!r}, env_var={self.env_var!r})"
        )


# * JSON parsing errors (config file)
class JSONParsingError(GitGuyError):
    pass


# * Base error for file I/O operations
class FileOperationError(GitGuyError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass


# * No clipboard command available or every command failed
class ClipboardError(GitGuyError):
    pass
