"""
git-hooks: Manage git hooks from a config file.

Hooks are declared as shell commands in .githooks.toml (or under
[tool.githooks] in pyproject.toml) and written into .git/hooks.
"""

__version__ = "0.1.0"

from git_hooks.errors import ConfigError, GitHooksError, LockFileError
from git_hooks.models import (
    VALID_HOOKS,
    HookResult,
    HookStatus,
    InstallOptions,
    InstallOutcome,
    RemoveOutcome,
    normalize_commands,
)
from git_hooks.config import GitHooksConfig
from git_hooks.reporter import ConsoleReporter, Reporter
from git_hooks.hooks import HookInstaller, LockFileManager, render_script

__all__ = [
    # Version
    "__version__",
    # Errors
    "GitHooksError",
    "ConfigError",
    "LockFileError",
    # Models
    "VALID_HOOKS",
    "HookResult",
    "HookStatus",
    "InstallOptions",
    "InstallOutcome",
    "RemoveOutcome",
    "normalize_commands",
    # Core
    "GitHooksConfig",
    "Reporter",
    "ConsoleReporter",
    "HookInstaller",
    "LockFileManager",
    "render_script",
]
