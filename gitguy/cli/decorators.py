# gitguy/cli/decorators.py
# CLI decorator for error handling w/ Rich output

import functools
from typing import Any, Callable, TypeVar, cast

from ..core.exceptions import (
    AIError,
    ConfigurationError,
    DiffError,
    FileOperationError,
    GitError,
    GitGuyError,
    JSONParsingError,
    NotARepositoryError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling GitGuy errors in CLI commands w/ Rich output
def handle_gitguy_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..gitguy_io.console import console

        try:
            return func(*args, **kwargs)
        except NotARepositoryError as e:
            console.print(format_error_message("Repository Error", str(e)))
            raise SystemExit(1)
        except GitError as e:
            console.print(format_error_message("Git Error", str(e)))
            raise SystemExit(1)
        except DiffError as e:
            console.print(format_error_message("Diff Error", str(e)))
            raise SystemExit(1)
        except AIError as e:
            console.print(format_error_message("AI Error", str(e)))
            raise SystemExit(1)
        except ConfigurationError as e:
            console.print(format_error_message("Configuration Error", str(e)))
            raise SystemExit(1)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except GitGuyError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)
        except Exception as e:
            console.print(format_error_message("Unexpected Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
