"""
Hook management for git-hooks.

Provides utilities for:
- Rendering hook scripts
- Installing, updating and removing hooks
- Maintaining the lock file
"""

from git_hooks.hooks.install import HookInstaller, write_hook
from git_hooks.hooks.lock import IGNORE_FILE, LOCK_FILE, LockFileManager
from git_hooks.hooks.render import host_needs_shebang_compat, needs_shebang, render_script

__all__ = [
    "HookInstaller",
    "write_hook",
    "LockFileManager",
    "LOCK_FILE",
    "IGNORE_FILE",
    "render_script",
    "needs_shebang",
    "host_needs_shebang_compat",
]
