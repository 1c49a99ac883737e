"""Service helpers for pulling every local clone under a directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import typer

from ...core.git_client import GitClient
from ...core.gitconfig import has_remote_origin, is_git_repo


def find_sync_targets(start_dir: Path) -> list[Path]:
    """Immediate child directories that are git working copies with an origin remote."""
    children = sorted(c for c in start_dir.iterdir() if c.is_dir())
    return [c for c in children if is_git_repo(c) and has_remote_origin(c)]


def update_all(start_dir: Path, git: GitClient, echo: Callable[[str], None] = typer.echo) -> list[Path]:
    """Pull each sync target and echo git's output.

    The first failing pull raises GitError and stops the scan.
    """
    echo(f"*** Looking for git repos in {start_dir}...")
    pulled: list[Path] = []
    for d in find_sync_targets(start_dir):
        echo(git.pull(d))
        pulled.append(d)
    return pulled
