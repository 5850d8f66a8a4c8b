# tests/unit/git/test_git_repo.py
# Unit tests for repository access w/ git calls faked out

from pathlib import Path
from unittest.mock import patch

import pytest

from gitguy.core.exceptions import GitError, NotARepositoryError
from gitguy.diffing.edits import apply_edits
from gitguy.git.repo import GitRepo, RefInfo, STAGED_REF_NAME, parse_porcelain

ROOT = Path("/repo")


# fake `git` keyed on the first argument; callables receive the full arg list
def _fake_git(responses):
    def run(args, cwd=None, strip=True):
        response = responses.get(args[0])
        if callable(response):
            response = response(args)
        if isinstance(response, Exception):
            raise response
        if response is None:
            raise GitError(f"Git command failed: git {' '.join(args)}")
        return response.strip() if strip else response

    return run


@pytest.fixture
def fake_repo(monkeypatch):
    def install(responses, root=ROOT):
        monkeypatch.setattr("gitguy.git.repo.run_git", _fake_git(responses))
        return GitRepo(root)

    return install


class TestParsePorcelain:

    # * Verify index & worktree columns, renames & untracked entries
    def test_parse(self):
        output = "M  staged.py\0 M edited.py\0R  new.py\0old.py\0?? scratch.txt\0"
        assert parse_porcelain(output) == [
            ("M", " ", "staged.py"),
            (" ", "M", "edited.py"),
            ("R", " ", "new.py"),
            ("?", "?", "scratch.txt"),
        ]

    # * Verify empty output yields no entries
    def test_empty(self):
        assert parse_porcelain("") == []


class TestRefInfo:

    # * Verify revision & label per ref kind
    def test_revision_and_label(self):
        branch = RefInfo("main", "abc12345", "branch")
        commit = RefInfo("fix: x - deadbeef", "deadbeef" + "0" * 32, "commit")
        staged = RefInfo(STAGED_REF_NAME, "staged", "staged")
        assert (branch.revision, branch.label) == ("main", "main")
        assert (commit.revision, commit.label) == (commit.hash, "deadbeef")
        assert staged.is_staged and staged.label == "staged"


class TestOpen:

    # * Verify open resolves the top level
    def test_open(self):
        with patch("gitguy.git.repo.run_git", return_value="/repo"):
            assert GitRepo.open("/repo/sub").root == ROOT

    # * Verify outside a work tree raises NotARepositoryError
    def test_not_a_repo(self, tmp_path):
        with patch("gitguy.git.repo.run_git", side_effect=GitError("fatal")):
            with pytest.raises(NotARepositoryError, match="Not in a git repository"):
                GitRepo.open(tmp_path)


class TestRefs:

    # * Verify branches parse name, short hash & HEAD marker
    def test_branches(self, fake_repo):
        repo = fake_repo(
            {"for-each-ref": "main\0" + "a" * 40 + "\0*\nfeature\0" + "b" * 40 + "\0 \n"}
        )
        branches = repo.branches()
        assert branches == [
            RefInfo("main", "aaaaaaaa", "branch", True),
            RefInfo("feature", "bbbbbbbb", "branch", False),
        ]

    # * Verify long subjects are truncated & the short hash appended
    def test_recent_commits(self, fake_repo):
        sha = "a" * 40
        repo = fake_repo({"log": f"{sha}\0{'x' * 60}\n{'c' * 40}\0short"})
        commits = repo.recent_commits(2)
        assert commits[0].name == "x" * 47 + "... - aaaaaaaa"
        assert commits[0].hash == sha
        assert commits[1].name == "short - cccccccc"
        assert all(c.kind == "commit" for c in commits)

    # * Verify an unborn HEAD yields no commits
    def test_recent_commits_unborn(self, fake_repo):
        repo = fake_repo({})
        assert repo.recent_commits() == []

    # * Verify the staged pseudo-ref only exists w/ staged changes
    def test_staged_ref(self, fake_repo):
        repo = fake_repo({"status": " M edited.py\0"})
        assert repo.staged_ref() is None
        repo = fake_repo({"status": "A  new.py\0"})
        assert repo.staged_ref() == RefInfo(STAGED_REF_NAME, "staged", "staged")


def _cat_file(blobs):
    def run(args):
        return blobs.get(args[2], GitError("missing"))

    return run


# revised content reconstructed from the edit script
def _revised(file_diff):
    return apply_edits(file_diff.original, file_diff.edits)


class TestFileDiffs:

    # * Verify staged diffs compare HEAD against the index
    def test_staged(self, fake_repo):
        repo = fake_repo(
            {
                "status": "M  app.py\0A  new.py\0 M other.py\0",
                "cat-file": _cat_file(
                    {"HEAD:app.py": "a\n", ":app.py": "b\n", ":new.py": "fresh\n"}
                ),
            }
        )
        diffs = repo.staged_file_diffs()
        assert [d.filename for d in diffs] == ["app.py", "new.py"]
        assert diffs[1].original == ""
        assert _revised(diffs[1]) == "fresh\n"

    # * Verify unstaged diffs compare HEAD against the working tree
    def test_unstaged(self, fake_repo, tmp_path):
        (tmp_path / "app.py").write_text("changed\n", encoding="utf-8")
        repo = fake_repo(
            {
                "status": " M app.py\0 D gone.py\0",
                "cat-file": _cat_file({"HEAD:app.py": "a\n", "HEAD:gone.py": "bye\n"}),
            },
            root=tmp_path,
        )
        diffs = repo.unstaged_file_diffs()
        assert [d.filename for d in diffs] == ["app.py", "gone.py"]
        assert _revised(diffs[0]) == "changed\n"
        assert _revised(diffs[1]) == ""

    # * Verify ref pairs diff commit contents & skip unchanged files
    def test_between_refs(self, fake_repo):
        repo = fake_repo(
            {
                "diff": "b.py\0a.py\0",
                "cat-file": _cat_file(
                    {
                        "main:a.py": "1\n",
                        "feature:a.py": "2\n",
                        "main:b.py": "same\n",
                        "feature:b.py": "same\n",
                    }
                ),
            }
        )
        diffs = repo.file_diffs_for_refs(
            RefInfo("main", "m", "branch"), RefInfo("feature", "f", "branch")
        )
        assert [d.filename for d in diffs] == ["a.py"]

    # * Verify the staged pseudo-ref routes to the index diff
    def test_staged_ref_pair(self):
        repo = GitRepo(ROOT)
        with patch.object(repo, "staged_file_diffs", return_value=["sentinel"]) as staged:
            result = repo.file_diffs_for_refs(
                RefInfo(STAGED_REF_NAME, "staged", "staged"), RefInfo("main", "m", "branch")
            )
        staged.assert_called_once()
        assert result == ["sentinel"]
