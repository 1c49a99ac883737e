"""Small helpers for running the git commands ghsync needs."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .constants import APP_NAME, REMOTE_NAME

logger = logging.getLogger(APP_NAME)


class GitError(RuntimeError):
    pass


class GitClient:
    # ---------- process helpers ----------
    @staticmethod
    def _run(cmd: list[str], cwd: Path | None = None) -> None:
        logger.debug(f"Running {' '.join(cmd)} in {cwd or Path.cwd()}")
        try:
            subprocess.check_call(cmd, cwd=cwd)
        except subprocess.CalledProcessError as e:
            raise GitError(f"{e}") from e

    @staticmethod
    def _run_out(cmd: list[str], cwd: Path | None = None) -> str:
        logger.debug(f"Running {' '.join(cmd)} in {cwd or Path.cwd()}")
        try:
            out = subprocess.check_output(cmd, cwd=cwd, stderr=subprocess.STDOUT)
            return out.decode("utf-8", "replace").rstrip("\n")
        except subprocess.CalledProcessError as e:
            output = (e.output or b"").decode("utf-8", "replace").rstrip("\n")
            raise GitError(output or f"{e}") from e

    # ---------- clone ----------
    def clone(self, url: str, target: Path) -> None:
        """Full-history clone; git's own progress goes straight to the terminal."""
        self._run(["git", "clone", url, str(target)])

    # ---------- pull ----------
    def pull(self, repo_dir: Path, remote: str = REMOTE_NAME) -> str:
        """Pull from remote and return git's output text."""
        return self._run_out(["git", "pull", remote], cwd=repo_dir)
