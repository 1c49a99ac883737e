"""Classification of local directories as git working copies."""

from __future__ import annotations

from pathlib import Path

from git.config import GitConfigParser

from .constants import REMOTE_NAME


def is_git_repo(d: Path) -> bool:
    """d has a .git directory; a .git file (linked worktree) does not count."""
    return (d / ".git").is_dir()


def has_remote_origin(repo_dir: Path) -> bool:
    """True if repo_dir/.git/config declares a [remote "origin"] section."""
    config = repo_dir / ".git" / "config"
    if not config.is_file():
        return False
    with GitConfigParser(str(config), read_only=True) as reader:
        return f'remote "{REMOTE_NAME}"' in reader.sections()
