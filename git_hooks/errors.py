"""
Exceptions raised by git-hooks.
"""


class GitHooksError(Exception):
    """Base error for git-hooks."""


class ConfigError(GitHooksError, ValueError):
    """Invalid hook configuration."""


class LockFileError(GitHooksError):
    """The lock file exists but cannot be parsed."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Invalid lock file {path}: {message}")
