"""Clone a GitHub account's repositories locally and keep local clones pulled."""

__version__ = "1.1.0"
