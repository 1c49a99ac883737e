"""Module holding constants used across ghsync."""

APP_NAME = "ghsync"
DEFAULT_GITHUB_HOST = "github.com"
DEFAULT_GITHUB_USER = "tammycravit"
DEFAULT_PROJECTS_SUBDIR = "projects"
REMOTE_NAME = "origin"
USER_AGENT = "ghsync/1.1 (+https://github.com/tammycravit)"
HTTP_TIMEOUT_SEC = 30


def api_base(host: str = DEFAULT_GITHUB_HOST) -> str:
    """github.com -> https://api.github.com"""
    return f"https://api.{host}"


def api_accept(host: str = DEFAULT_GITHUB_HOST) -> str:
    """github.com -> application/vnd.github.v3+json"""
    return f"application/vnd.{host.split('.')[0]}.v3+json"


def ssh_clone_url(host: str, user: str, name: str) -> str:
    return f"git@{host}:{user}/{name}.git"
