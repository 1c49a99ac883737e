"""CLI for cloning every repository of a GitHub account."""

from pathlib import Path

import typer

from ... import __version__
from ...config.settings import default_project_dir, get_settings
from ...core.git_client import GitClient, GitError
from ...core.github_client import GitHubClient, GitHubError
from ...core.utils import configure_logging
from .service import clone_user_repos

app = typer.Typer(add_completion=False, help="Clone all of your GitHub repos into a project directory.")


def _client() -> GitHubClient:
    s = get_settings()
    return GitHubClient(host=s.github_host, token=s.github_token)


def _fail(e: Exception) -> typer.Exit:
    typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
    return typer.Exit(code=1)


def _verbose_callback(value: bool) -> bool:
    configure_logging(value)
    return value


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"clone-github {__version__}")
        raise typer.Exit()


def _validate_github_user(value: str | None) -> str | None:
    if value is None:
        return value
    try:
        exists = _client().user_exists(value)
    except GitHubError as e:
        raise _fail(e) from e
    if not exists:
        typer.secho(f"Error: GitHub user '{value}' does not exist.", err=True, fg=typer.colors.RED)
        raise typer.Exit()
    return value


def _validate_project_dir(value: Path | None) -> Path | None:
    if value is None or value.is_dir():
        return value
    typer.secho(f"Error: project directory {value} does not exist.", err=True, fg=typer.colors.RED)
    raise typer.Exit()


@app.command()
def clone(
    github_user: str | None = typer.Option(
        None, "--github-user", metavar="USER", callback=_validate_github_user, help="GitHub account to clone from"
    ),
    project_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--project-dir",
        metavar="DIR",
        is_eager=True,
        callback=_validate_project_dir,
        help="Directory to clone into (default: $HOME/projects or the current directory)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", is_eager=True, callback=_verbose_callback),
    version: bool = typer.Option(False, "--version", is_eager=True, callback=_version_callback),
):
    """Clone every repository of the account that has no local clone yet."""
    s = get_settings()
    typer.echo(f"* clone-github {__version__}: clone all of your GitHub repos into a project directory")
    typer.echo("")
    try:
        clone_user_repos(
            github_user=github_user or s.github_user,
            project_dir=project_dir or default_project_dir(),
            client=_client(),
            git=GitClient(),
        )
    except (GitHubError, GitError) as e:
        raise _fail(e) from e
