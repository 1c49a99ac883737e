"""Tests for pull-all's directory classification and pull loop."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ghsync.commands.update.service import find_sync_targets, update_all
from ghsync.core.git_client import GitError
from ghsync.core.gitconfig import is_git_repo

ORIGIN_CONFIG = '[core]\n\tbare = false\n[remote "origin"]\n\turl = git@github.com:acme/x.git\n'


def _git_repo(path: Path, config: str) -> Path:
    (path / ".git").mkdir(parents=True)
    (path / ".git" / "config").write_text(config)
    return path


@pytest.fixture
def projects(tmp_path: Path) -> Path:
    """x: clone with origin, y: plain directory, z: repo with only [core]."""
    _git_repo(tmp_path / "x", ORIGIN_CONFIG)
    (tmp_path / "y").mkdir()
    _git_repo(tmp_path / "z", "[core]\n\tbare = false\n")
    return tmp_path


def test_only_repo_with_origin_is_pulled(projects: Path) -> None:
    """Verifies that of x, y and z only x is pulled and its output echoed.

    Args:
        projects (Path): Directory fixture with x, y and z.
    """
    git = MagicMock()
    git.pull.return_value = "Already up to date."
    lines: list[str] = []

    pulled = update_all(projects, git, echo=lines.append)

    assert pulled == [projects / "x"]
    git.pull.assert_called_once_with(projects / "x")
    assert lines == [f"*** Looking for git repos in {projects}...", "Already up to date."]


def test_git_file_is_not_a_repo(tmp_path: Path) -> None:
    """Verifies that a file literally named .git does not make a pull target.

    Args:
        tmp_path (Path): Pytest fixture for a temporary directory.
    """
    worktree = tmp_path / "w"
    worktree.mkdir()
    (worktree / ".git").write_text("gitdir: /elsewhere/.git/worktrees/w\n")

    assert not is_git_repo(worktree)
    assert find_sync_targets(tmp_path) == []


def test_files_in_start_dir_are_ignored(projects: Path) -> None:
    """Verifies that only directories are considered.

    Args:
        projects (Path): Directory fixture with x, y and z.
    """
    (projects / "notes.txt").write_text('[remote "origin"]\n')

    assert find_sync_targets(projects) == [projects / "x"]


def test_targets_are_sorted(tmp_path: Path) -> None:
    """Verifies a deterministic, name-ordered scan.

    Args:
        tmp_path (Path): Pytest fixture for a temporary directory.
    """
    for name in ("c", "a", "b"):
        _git_repo(tmp_path / name, ORIGIN_CONFIG)

    assert [p.name for p in find_sync_targets(tmp_path)] == ["a", "b", "c"]


def test_pull_failure_stops_scan(tmp_path: Path) -> None:
    """Verifies that the first failing pull propagates and later repos are not pulled.

    Args:
        tmp_path (Path): Pytest fixture for a temporary directory.
    """
    _git_repo(tmp_path / "a", ORIGIN_CONFIG)
    _git_repo(tmp_path / "b", ORIGIN_CONFIG)
    git = MagicMock()
    git.pull.side_effect = GitError("CONFLICT (content): Merge conflict in README.md")

    with pytest.raises(GitError, match="CONFLICT"):
        update_all(tmp_path, git, echo=lambda _: None)

    git.pull.assert_called_once_with(tmp_path / "a")
