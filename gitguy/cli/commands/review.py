# gitguy/cli/commands/review.py
# Interactive review: select refs, preview the diff, generate & save the PR description

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ...ai.types import GenerateResult
from ...config.settings import get_settings
from ...git.repo import GitRepo, RefInfo
from ...ui.review.review_display import ReviewSession
from ...ui.review.review_state import DiffPreview
from ..app import app
from ..decorators import handle_gitguy_error
from ..logic import _resolve, build_diff_preview, generate_for_diff, save_pr_description


# staged pseudo-ref first, then branches, then recent commits
def collect_refs(repo: GitRepo, limit: int) -> list[RefInfo]:
    refs: list[RefInfo] = []
    staged = repo.staged_ref()
    if staged is not None:
        refs.append(staged)
    refs.extend(repo.branches())
    refs.extend(repo.recent_commits(limit))
    return refs


@app.command()
@handle_gitguy_error
def review(
    ctx: typer.Context,
    out_pr: Optional[str] = typer.Option(
        None, "--out-pr", help="Output file for the PR description ({{ID}} is randomized)"
    ),
    model: Optional[str] = typer.Option(None, "--model", help="Model to use"),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", help="OpenRouter API key (overrides env & config)"
    ),
    pr_template: Optional[Path] = typer.Option(
        None, "--pr-template", help="Markdown PR template to guide the description"
    ),
) -> None:
    """Pick two refs, review their diff & generate a commit message and PR."""
    settings = get_settings(ctx)
    repo = GitRepo.open(".")
    refs = collect_refs(repo, settings.recent_commits)
    output_name = _resolve(out_pr, settings.out_pr)

    def load_diff(current: RefInfo, incoming: RefInfo, width: int) -> DiffPreview:
        return build_diff_preview(
            repo.file_diffs_for_refs(current, incoming), width, settings
        )

    def generate(diff_text: str) -> GenerateResult:
        return generate_for_diff(
            diff_text, settings, api_key=api_key, model=model, pr_template=pr_template
        )

    def save_pr(result: GenerateResult, current: RefInfo, incoming: RefInfo) -> Path:
        return save_pr_description(result, current.label, incoming.label, output_name)

    ReviewSession(refs, load_diff, generate, save_pr).run()
