# gitguy/git/runner.py
# Git command runner: one subprocess call per command, errors mapped to GitError

from __future__ import annotations

import subprocess
from pathlib import Path

from ..core.exceptions import GitError
from ..core.verbose import vlog_git


# * Run a git command & return its stdout
# * strip=False preserves file content exactly (trailing newline included)
def run_git(args: list[str], cwd: Path | str | None = None, strip: bool = True) -> str:
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}") from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e

    output = result.stdout
    vlog_git(args, len(output))
    return output.strip() if strip else output
