# gitguy/cli/logic.py
# CLI-layer logic: diff collection, generation & PR output shared by generate & review

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..ai.client import OpenRouterClient
from ..ai.types import GenerateResult
from ..config.settings import GitGuySettings, resolve_api_key
from ..core.exceptions import AIError, NoChangesError
from ..core.verbose import vlog_config, vlog_stage
from ..diffing.file_diff import FileDiff, combine_file_diffs
from ..gitguy_io.pr_writer import build_pr_document, expand_pr_template, write_pr_file
from ..git.repo import GitRepo
from ..ui.diff_viewer.static import render_side_by_side_from_edits
from ..ui.review.review_state import DiffPreview


def _resolve(provided_value: Any, settings_default: Any) -> Any:
    return settings_default if provided_value is None else provided_value


# * Collect file diffs for `gitguy diff`; default tries unstaged first, then staged
def collect_worktree_diffs(
    repo: GitRepo, staged: bool = False, unstaged: bool = False
) -> list[FileDiff]:
    if staged:
        vlog_stage("Diff", "staged changes")
        diffs = repo.staged_file_diffs()
        if not diffs:
            raise NoChangesError("no staged changes found")
        return diffs
    if unstaged:
        vlog_stage("Diff", "unstaged changes")
        diffs = repo.unstaged_file_diffs()
        if not diffs:
            raise NoChangesError("no unstaged changes found")
        return diffs

    diffs = repo.unstaged_file_diffs()
    if diffs:
        vlog_stage("Diff", "unstaged changes")
        return diffs
    diffs = repo.staged_file_diffs()
    if diffs:
        vlog_stage("Diff", "staged changes")
        return diffs
    raise NoChangesError("no changes found (neither staged nor unstaged)")


# * Build the review diff screen: one side-by-side block per file & the unified text
def build_diff_preview(
    file_diffs: list[FileDiff],
    width: int,
    settings: GitGuySettings,
) -> DiffPreview:
    blocks: list[str] = []
    for file_diff in file_diffs:
        rendered = render_side_by_side_from_edits(
            file_diff.edits,
            file_diff.original,
            file_diff.filename,
            width,
            syntax_highlight=settings.syntax_highlight,
            show_whitespace=settings.show_whitespace,
        )
        blocks.append(f"diff --git a/{file_diff.filename} b/{file_diff.filename}")
        blocks.append(rendered)
    unified = combine_file_diffs(file_diffs, settings.context_lines)
    display = "\n".join(blocks) if blocks else "No changes to display"
    return DiffPreview(display_text=display, unified_text=unified)


# * Run one generation against OpenRouter w/ flag > env > config resolution
def generate_for_diff(
    diff_text: str,
    settings: GitGuySettings,
    api_key: str | None = None,
    model: str | None = None,
    pr_template: Path | None = None,
) -> GenerateResult:
    key = resolve_api_key(api_key, settings)
    model_name = _resolve(model, settings.model)
    template = _resolve(pr_template, settings.pr_template_path)
    vlog_config("model", model_name)
    if template is not None:
        vlog_config("pr_template", template)

    client = OpenRouterClient(key, pr_template=template, api_logging=settings.api_logging)
    vlog_stage("Generate", f"{len(diff_text):,} chars of diff")
    return client.run_generate(diff_text, model_name)


# raises instead of returning a failed result; for the non-interactive command
def require_success(result: GenerateResult) -> GenerateResult:
    if not result.success:
        raise AIError(result.error or "generation failed")
    return result


# * Write the PR markdown w/ front matter; returns the final path
def save_pr_description(
    result: GenerateResult, base: str, head: str, out_pr: str
) -> Path:
    target = expand_pr_template(out_pr)
    document = build_pr_document(result.commit_message, result.pr_description, base, head)
    return write_pr_file(target, document)
