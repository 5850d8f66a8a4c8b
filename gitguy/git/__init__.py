# gitguy/git/__init__.py
# Subprocess-backed git access

from .repo import RefInfo, GitRepo, STAGED_REF_NAME
from .runner import run_git

__all__ = ["RefInfo", "GitRepo", "STAGED_REF_NAME", "run_git"]
