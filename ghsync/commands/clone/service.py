"""Services for the clone-github command."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import typer

from ...core.constants import DEFAULT_GITHUB_HOST, ssh_clone_url
from ...core.git_client import GitClient
from ...core.github_client import GitHubClient
from ...core.gitconfig import is_git_repo
from ...core.types import Repository, SyncResult


def is_cloned(target: Path) -> bool:
    """A directory with a .git inside counts as a clone; its remote is not checked."""
    return target.exists() and is_git_repo(target)


def sync_repos(
    repos: Iterable[Repository],
    project_dir: Path,
    github_user: str,
    git: GitClient,
    host: str = DEFAULT_GITHUB_HOST,
    echo: Callable[[str], None] = typer.echo,
) -> SyncResult:
    """Clone every repository that has no local clone under project_dir.

    A failing clone raises GitError and ends the run.
    """
    result = SyncResult()
    for repo in repos:
        result.checked += 1
        target = project_dir / repo.name
        if is_cloned(target):
            echo(f"    - Found repo clone for {repo.name} - skipping")
            continue
        echo(f"    - Cloning {repo.name}")
        git.clone(ssh_clone_url(host, github_user, repo.name), target)
        result.cloned += 1
    return result


def clone_user_repos(
    github_user: str,
    project_dir: Path,
    client: GitHubClient,
    git: GitClient,
    echo: Callable[[str], None] = typer.echo,
) -> SyncResult:
    """List github_user's repositories and clone the missing ones into project_dir."""
    echo(f"- Github User: {github_user}")
    echo(f"- Project Dir: {project_dir}")
    echo("")
    echo(f"* Iterating Repos for {github_user}...")
    repos = client.list_repos(github_user)
    echo("* Checking/cloning Repos:")
    result = sync_repos(repos, project_dir, github_user, git, host=client.host, echo=echo)
    echo(f"Cloned {result.cloned} of {result.checked} repos.")
    return result
