"""
Lock file bookkeeping.

The lock file records which hooks are managed by git-hooks so that
``githooks remove`` only deletes hooks it installed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from git_hooks.errors import LockFileError
from git_hooks.models import InstallOptions
from git_hooks.reporter import Reporter

logger = logging.getLogger(__name__)

LOCK_FILE = ".githooks.lock"
IGNORE_FILE = ".gitignore"


class LockFileManager:
    """Reads and writes the lock file and its .gitignore entry."""

    def __init__(self, reporter: Reporter, root: Path | None = None):
        self.reporter = reporter
        self.root = root or Path(".")

    @property
    def lock_path(self) -> Path:
        return self.root / LOCK_FILE

    @property
    def ignore_path(self) -> Path:
        return self.root / IGNORE_FILE

    def write(self, hook_names: Iterable[str], options: InstallOptions) -> None:
        """Write the lock file for a finished install, then handle .gitignore."""
        if options.skip_lock:
            self.reporter.info(f"Skipped creating a {LOCK_FILE} file")
        else:
            self.save(hook_names)
            self.reporter.info(f"Created {LOCK_FILE} file")

        self.ignore(options)

    def ignore(self, options: InstallOptions) -> None:
        if not options.ignore_lock:
            self.reporter.info(f"Skipped adding {LOCK_FILE} to {IGNORE_FILE}")
            return

        content = self.ignore_path.read_text() if self.ignore_path.exists() else ""
        if LOCK_FILE not in content.splitlines():
            if content and not content.endswith("\n"):
                content += "\n"
            self.ignore_path.write_text(f"{content}{LOCK_FILE}\n")
            logger.debug("Appended %s to %s", LOCK_FILE, self.ignore_path)

        self.reporter.info(f"Added {LOCK_FILE} to {IGNORE_FILE}")

    def read(self) -> list[str]:
        """Return hook names from the lock file, or an empty list if there is none."""
        if not self.lock_path.exists():
            return []

        try:
            data = json.loads(self.lock_path.read_text())
        except json.JSONDecodeError as e:
            raise LockFileError(str(self.lock_path), str(e)) from e

        if not isinstance(data, list) or not all(isinstance(h, str) for h in data):
            raise LockFileError(str(self.lock_path), "expected a JSON array of hook names")

        return data

    def save(self, hook_names: Iterable[str]) -> None:
        names = list(hook_names)
        self.lock_path.write_text(json.dumps(names, separators=(",", ":")))
        logger.debug("Wrote %d hook(s) to %s", len(names), self.lock_path)
