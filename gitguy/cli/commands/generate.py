# gitguy/cli/commands/generate.py
# Non-interactive generation: diff two refs, print the commit message, write the PR file

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...ai.models import model_help_text
from ...config.settings import get_settings
from ...core.exceptions import NoChangesError
from ...diffing.file_diff import combine_file_diffs
from ...gitguy_io.console import console
from ...git.repo import GitRepo
from ...ui.theming.styled_helpers import styled_success_line
from ..app import app
from ..decorators import handle_gitguy_error
from ..logic import _resolve, generate_for_diff, require_success, save_pr_description


@app.command()
@handle_gitguy_error
def generate(
    ctx: typer.Context,
    ref_current: str = typer.Option(
        ..., "--ref-current", help="Current git ref (branch or commit SHA); PR base"
    ),
    ref_incoming: str = typer.Option(
        ..., "--ref-incoming", help="Incoming git ref (branch or commit SHA); PR head"
    ),
    out_pr: Optional[str] = typer.Option(
        None, "--out-pr", help="Output file for the PR description ({{ID}} is randomized)"
    ),
    model: Optional[str] = typer.Option(
        None, "--model", help=f"Model to use ({model_help_text()})"
    ),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="OpenRouter API key (overrides env & config)"
    ),
    pr_template: Optional[Path] = typer.Option(
        None, "--pr-template", help="Markdown PR template to guide the description"
    ),
) -> None:
    """Generate a commit message & PR description for the changes between two refs."""
    settings = get_settings(ctx)
    repo = GitRepo.open(".")

    file_diffs = repo.file_diffs_between(ref_current, ref_incoming)
    diff_text = combine_file_diffs(file_diffs, settings.context_lines)
    if not diff_text.strip():
        raise NoChangesError(
            f"no differences found between {ref_current} and {ref_incoming}"
        )

    result = require_success(
        generate_for_diff(
            diff_text,
            settings,
            api_key=api_key,
            model=model,
            pr_template=pr_template,
        )
    )

    # commit message goes to stdout unstyled so it can be piped into `git commit -F -`
    typer.echo(result.commit_message)

    path = save_pr_description(
        result, ref_current, ref_incoming, _resolve(out_pr, settings.out_pr)
    )
    console.print(*styled_success_line("PR description written", str(path)), highlight=False)
