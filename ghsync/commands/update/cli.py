"""CLI for pulling every local clone under a projects directory."""

from pathlib import Path

import typer

from ...config.settings import get_settings
from ...core.git_client import GitClient, GitError
from ...core.utils import configure_logging
from .service import update_all

app = typer.Typer(add_completion=False, help="Pull every git repo (with an origin remote) found under a directory.")


def resolve_start_dir(start_dir: Path | None) -> Path:
    """Argument, then PROJECTS_DIR, then the current directory."""
    if start_dir is not None:
        return start_dir
    return get_settings().projects_dir or Path.cwd()


@app.command()
def update(
    start_dir: Path | None = typer.Argument(None, metavar="START_DIR", help="Directory whose children are scanned"),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Typer command to pull the repos directly under start_dir."""
    configure_logging(verbose)
    the_dir = resolve_start_dir(start_dir).expanduser().resolve()
    if not the_dir.is_dir():
        typer.secho(f"Error: {the_dir} is not a directory.", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)
    try:
        update_all(the_dir, GitClient())
    except GitError as e:
        typer.secho(f"Error: {e}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from e
