# gitguy/gitguy_io/pr_writer.py
# PR description output: filename templating, front matter & atomic file writes

from __future__ import annotations

import os
import random
from pathlib import Path

import yaml

from ..core.exceptions import FileWriteError
from ..core.verbose import vlog_file_write
from .generics import ensure_parent

ID_PLACEHOLDER = "{{ID}}"
MAX_PR_ID = 255


# * Replace {{ID}} in an output filename w/ a random number 0-255
def expand_pr_template(name: str, rng: random.Random | None = None) -> str:
    if ID_PLACEHOLDER not in name:
        return name
    pr_id = (rng or random).randint(0, MAX_PR_ID)
    return name.replace(ID_PLACEHOLDER, str(pr_id))


# first line of the commit message
def _title(commit_message: str) -> str:
    stripped = commit_message.strip()
    return stripped.splitlines()[0] if stripped else ""


# * Markdown document w/ YAML front matter (title, base & head refs) then the description
def build_pr_document(
    commit_message: str, description: str, base: str, head: str
) -> str:
    front_matter = yaml.safe_dump(
        {"title": _title(commit_message), "base": base, "head": head},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
    body = description.strip()
    return f"---\n{front_matter}---\n\n{body}\n"


# * Write atomically: temp file beside the target then rename over it
def write_pr_file(path: Path | str, content: str) -> Path:
    target = Path(path)
    tmp = target.with_name(target.name + ".tmp")
    try:
        ensure_parent(target)
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, target)
    except OSError as e:
        # ! never leave a partial temp file behind
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            pass
        raise FileWriteError(f"Could not write PR file {target}: {e}", target) from e

    vlog_file_write(target, len(content))
    return target
