# gitguy/cli/commands/diff.py
# Interactive side-by-side diff viewer over working tree, index or a patch file

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...config.settings import get_settings
from ...core.exceptions import ConfigurationError
from ...core.output import get_output_manager
from ...gitguy_io.generics import read_text_safe
from ...git.repo import GitRepo
from ...ui.diff_viewer.viewer_display import DiffViewer
from ..app import app
from ..decorators import handle_gitguy_error
from ..logic import _resolve, collect_worktree_diffs


@app.command()
@handle_gitguy_error
def diff(
    ctx: typer.Context,
    side_by_side: Optional[bool] = typer.Option(
        None,
        "--side-by-side/--unified",
        help="Display diff side-by-side or unified (default from config)",
    ),
    staged: bool = typer.Option(False, "--staged", help="Show staged changes"),
    unstaged: bool = typer.Option(False, "--unstaged", help="Show unstaged changes"),
    syntax_highlighting: Optional[bool] = typer.Option(
        None,
        "--syntax-highlighting/--no-syntax-highlighting",
        help="Enable syntax highlighting",
    ),
    whitespace: Optional[bool] = typer.Option(
        None, "--whitespace/--no-whitespace", help="Show whitespace-only changes"
    ),
    patch: Optional[Path] = typer.Option(
        None,
        "--patch",
        help="View a unified diff file instead of repository changes",
        dir_okay=False,
    ),
) -> None:
    """Show git changes in the interactive diff viewer."""
    settings = get_settings(ctx)
    if staged and unstaged:
        raise ConfigurationError("--staged and --unstaged are mutually exclusive")

    options = dict(
        side_by_side=_resolve(side_by_side, settings.side_by_side),
        syntax_highlight=_resolve(syntax_highlighting, settings.syntax_highlight),
        show_whitespace=_resolve(whitespace, settings.show_whitespace),
    )
    logger = get_output_manager()

    if patch is not None:
        viewer = DiffViewer.from_unified(read_text_safe(patch), logger=logger, **options)
    else:
        repo = GitRepo.open(".")
        file_diffs = collect_worktree_diffs(repo, staged=staged, unstaged=unstaged)
        viewer = DiffViewer.from_file_diffs(
            file_diffs, logger=logger, context=settings.context_lines, **options
        )

    viewer.run()
