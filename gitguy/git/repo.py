# gitguy/git/repo.py
# Repository access: refs, commits, status & per-file content for diffing

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.exceptions import GitError, NotARepositoryError
from ..core.verbose import vlog_debug
from ..diffing.file_diff import FileDiff
from .runner import run_git

STAGED_REF_NAME = "Staged Changes"
STAGED_REF_HASH = "staged"

MAX_MESSAGE_LENGTH = 50
SHORT_HASH_LENGTH = 8


# * One selectable reference: a branch, a commit, or the pseudo-ref for the index
@dataclass(frozen=True, slots=True)
class RefInfo:
    name: str
    hash: str
    kind: str  # "branch", "commit" or "staged"
    is_head: bool = False

    @property
    def revision(self) -> str:
        # branches resolve by name; commits by full hash
        return self.name if self.kind == "branch" else self.hash

    @property
    def is_staged(self) -> bool:
        return self.kind == "staged"

    # short name used in PR front matter
    @property
    def label(self) -> str:
        if self.kind == "commit":
            return self.hash[:SHORT_HASH_LENGTH]
        if self.kind == "staged":
            return STAGED_REF_HASH
        return self.name


def _truncate_message(message: str) -> str:
    if len(message) > MAX_MESSAGE_LENGTH:
        return message[: MAX_MESSAGE_LENGTH - 3] + "..."
    return message


# * Parse `git status --porcelain=v1 -z` into (index_status, worktree_status, path)
def parse_porcelain(output: str) -> list[tuple[str, str, str]]:
    entries: list[tuple[str, str, str]] = []
    fields = output.split("\0")
    i = 0
    while i < len(fields):
        entry = fields[i]
        i += 1
        if len(entry) < 4:
            continue
        index_status, worktree_status, path = entry[0], entry[1], entry[3:]
        # renames & copies carry the source path as the next field
        if index_status in ("R", "C"):
            i += 1
        entries.append((index_status, worktree_status, path))
    return entries


class GitRepo:
    def __init__(self, root: Path):
        self.root = root

    # * Open the repository containing `path`
    @classmethod
    def open(cls, path: Path | str = ".") -> "GitRepo":
        try:
            top = run_git(["rev-parse", "--show-toplevel"], cwd=path)
        except GitError as e:
            raise NotARepositoryError(
                f"Not in a git repository: {Path(path).resolve()}"
            ) from e
        return cls(Path(top))

    def _git(self, args: list[str], strip: bool = True) -> str:
        return run_git(args, cwd=self.root, strip=strip)

    # ===== REFS =====

    def branches(self) -> list[RefInfo]:
        output = self._git(
            [
                "for-each-ref",
                "--format=%(refname:short)%00%(objectname)%00%(HEAD)",
                "refs/heads",
            ]
        )
        refs: list[RefInfo] = []
        for line in output.splitlines():
            parts = line.split("\0")
            if len(parts) != 3:
                continue
            name, sha, head = parts
            refs.append(RefInfo(name, sha[:SHORT_HASH_LENGTH], "branch", head == "*"))
        return refs

    # newest first; an unborn HEAD has no commits
    def recent_commits(self, limit: int = 10) -> list[RefInfo]:
        try:
            output = self._git(["log", f"--max-count={limit}", "--format=%H%x00%s"])
        except GitError as e:
            vlog_debug("GIT", f"No commits available: {e}")
            return []

        refs: list[RefInfo] = []
        for line in output.splitlines():
            sha, _, subject = line.partition("\0")
            message = _truncate_message(subject)
            refs.append(
                RefInfo(f"{message} - {sha[:SHORT_HASH_LENGTH]}", sha, "commit")
            )
        return refs

    # ===== STATUS =====

    def _status(self) -> list[tuple[str, str, str]]:
        return parse_porcelain(
            self._git(["status", "--porcelain=v1", "-z"], strip=False)
        )

    def staged_paths(self) -> list[str]:
        return sorted(p for x, _, p in self._status() if x not in (" ", "?"))

    def unstaged_paths(self) -> list[str]:
        return sorted(p for _, y, p in self._status() if y not in (" ", "?"))

    def has_staged_changes(self) -> bool:
        return bool(self.staged_paths())

    def staged_ref(self) -> RefInfo | None:
        if not self.has_staged_changes():
            return None
        return RefInfo(STAGED_REF_NAME, STAGED_REF_HASH, "staged")

    # ===== CONTENT =====

    # missing on that side (new or deleted file) reads as empty
    def content_at(self, rev: str, path: str) -> str:
        try:
            return self._git(["cat-file", "blob", f"{rev}:{path}"], strip=False)
        except GitError:
            return ""

    def head_content(self, path: str) -> str:
        return self.content_at("HEAD", path)

    def staged_content(self, path: str) -> str:
        # ":path" names the stage-0 index entry
        return self.content_at("", path)

    def worktree_content(self, path: str) -> str:
        file_path = self.root / path
        try:
            return file_path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return ""
        except OSError as e:
            raise GitError(f"Could not read {file_path}: {e}") from e

    # ===== FILE DIFFS =====

    def _file_diffs(self, paths: list[str], base, revised) -> list[FileDiff]:
        diffs: list[FileDiff] = []
        for path in paths:
            file_diff = FileDiff.from_contents(path, base(path), revised(path))
            if file_diff.has_changes:
                diffs.append(file_diff)
        return diffs

    # HEAD vs index
    def staged_file_diffs(self) -> list[FileDiff]:
        return self._file_diffs(
            self.staged_paths(), self.head_content, self.staged_content
        )

    # HEAD vs working tree
    def unstaged_file_diffs(self) -> list[FileDiff]:
        return self._file_diffs(
            self.unstaged_paths(), self.head_content, self.worktree_content
        )

    def file_diffs_between(self, from_rev: str, to_rev: str) -> list[FileDiff]:
        output = self._git(["diff", "--name-only", "-z", from_rev, to_rev], strip=False)
        paths = sorted(p for p in output.split("\0") if p)
        return self._file_diffs(
            paths,
            lambda p: self.content_at(from_rev, p),
            lambda p: self.content_at(to_rev, p),
        )

    # * Diffs for a ref pair; the staged pseudo-ref compares HEAD against the index
    def file_diffs_for_refs(self, current: RefInfo, incoming: RefInfo) -> list[FileDiff]:
        if current.is_staged or incoming.is_staged:
            return self.staged_file_diffs()
        return self.file_diffs_between(current.revision, incoming.revision)
