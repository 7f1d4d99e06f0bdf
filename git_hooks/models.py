"""
Data models for git-hooks.

These models describe hook definitions, install options and the
per-hook results produced by the installer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from git_hooks.errors import ConfigError

# Hook names git invokes, in the order they appear in githooks(5).
VALID_HOOKS: tuple[str, ...] = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "p4-changelist",
    "p4-prepare-changelist",
    "p4-post-changelist",
    "p4-pre-submit",
    "post-index-change",
)

DEFAULT_GIT_DIR = ".git"

# Hook name -> ordered shell commands.
HookDefinitions = dict[str, list[str]]


def normalize_commands(value: Any) -> list[str]:
    """Turn a configured command (string or list of strings) into a list."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigError(f"Hook commands must be a string or a list of strings, got {value!r}")


class InstallOutcome(str, Enum):
    """What happened to a single hook file."""

    CREATED = "created"
    SKIPPED = "skipped"
    OVERWRITTEN = "overwritten"
    UPDATED = "updated"

    @property
    def installed(self) -> bool:
        return self is not InstallOutcome.SKIPPED


class RemoveOutcome(str, Enum):
    """What happened when removing a single hook file."""

    REMOVED = "removed"
    MISSING = "missing"
    NOT_LOCKED = "not_locked"


@dataclass(frozen=True)
class InstallOptions:
    """Options for installing hooks."""

    force: bool = False
    force_windows: bool = False
    git_dir: str = DEFAULT_GIT_DIR
    skip_lock: bool = False
    ignore_lock: bool = False
    stop_on_failure: tuple[str, ...] = ()

    @property
    def hooks_dir(self) -> Path:
        return Path(self.git_dir) / "hooks"


@dataclass
class HookResult:
    """Result of writing one hook."""

    hook: str
    outcome: InstallOutcome
    path: Path


@dataclass
class HookStatus:
    """Installation state of one configured hook."""

    hook: str
    installed: bool
    up_to_date: bool
    locked: bool
