"""
Git hook installation.

Writes one script per configured hook into ``{git_dir}/hooks`` and keeps
the lock file in step with what was installed.
"""

from __future__ import annotations

import logging
import stat
import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional

from git_hooks.errors import ConfigError
from git_hooks.hooks.lock import LockFileManager
from git_hooks.hooks.render import host_needs_shebang_compat, needs_shebang, render_script
from git_hooks.models import (
    HookDefinitions,
    HookResult,
    HookStatus,
    InstallOptions,
    InstallOutcome,
    RemoveOutcome,
)
from git_hooks.reporter import Reporter

logger = logging.getLogger(__name__)

NO_HOOKS_ADDED = "No hooks were added. Try updating"
NO_HOOKS_UPDATED = "No hooks were updated"


def write_hook(hook_path: Path, content: str) -> None:
    """Write a hook script and mark it executable."""
    # LF line endings on every platform
    with open(hook_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)

    hook_path.chmod(hook_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    logger.debug("Wrote %s", hook_path)


class HookInstaller:
    """
    Installs, updates and removes hook scripts.

    Usage:
        installer = HookInstaller(ConsoleReporter())
        installer.install({"pre-commit": ["ruff check ."]}, InstallOptions())
    """

    def __init__(
        self,
        reporter: Reporter,
        host_check: Callable[[], bool] = host_needs_shebang_compat,
        lock: Optional[LockFileManager] = None,
    ):
        self.reporter = reporter
        self.host_check = host_check
        self.lock = lock or LockFileManager(reporter)

    def render(self, hook: str, commands: list[str], options: InstallOptions) -> str:
        return render_script(
            commands,
            windows_shebang=needs_shebang(options.force_windows, self.host_check),
            stop_on_failure=hook in options.stop_on_failure,
        )

    def _ensure_hooks_dir(self, options: InstallOptions) -> Path:
        hooks_dir = options.hooks_dir
        if not hooks_dir.is_dir():
            hooks_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("Created hooks directory %s", hooks_dir)
        return hooks_dir

    def install(self, hooks: HookDefinitions, options: InstallOptions) -> list[HookResult]:
        """
        Add every configured hook that is not installed yet.

        Existing hook files are left alone unless ``options.force`` is set.
        The lock file is written only when at least one hook was written.

        Args:
            hooks: Hook name to commands, in install order
            options: Install options

        Returns:
            One result per configured hook
        """
        if not hooks:
            self.reporter.error(NO_HOOKS_ADDED)
            return []

        hooks_dir = self._ensure_hooks_dir(options)
        results: list[HookResult] = []

        for hook, commands in hooks.items():
            hook_path = hooks_dir / hook
            exists = hook_path.exists()

            if exists and not options.force:
                self.reporter.info(f"{hook} already exists")
                results.append(HookResult(hook, InstallOutcome.SKIPPED, hook_path))
                continue

            write_hook(hook_path, self.render(hook, commands, options))

            if exists:
                self.reporter.info(f"Overwrote {hook} hook")
                results.append(HookResult(hook, InstallOutcome.OVERWRITTEN, hook_path))
            else:
                self.reporter.info(f"Added {hook} hook")
                results.append(HookResult(hook, InstallOutcome.CREATED, hook_path))

        if not any(result.outcome.installed for result in results):
            self.reporter.error(NO_HOOKS_ADDED)
            return results

        self.lock.write(hooks.keys(), options)
        return results

    def update(self, hooks: HookDefinitions, options: InstallOptions) -> list[HookResult]:
        """Rewrite every configured hook, whether or not it exists."""
        if not hooks:
            self.reporter.error(NO_HOOKS_UPDATED)
            return []

        hooks_dir = self._ensure_hooks_dir(options)
        results: list[HookResult] = []

        for hook, commands in hooks.items():
            hook_path = hooks_dir / hook
            write_hook(hook_path, self.render(hook, commands, options))
            self.reporter.info(f"Updated {hook} hook")
            results.append(HookResult(hook, InstallOutcome.UPDATED, hook_path))

        self.lock.write(hooks.keys(), options)
        return results

    def remove(
        self,
        hook_names: Iterable[str],
        options: InstallOptions,
        force: bool = False,
    ) -> list[tuple[str, RemoveOutcome]]:
        """
        Delete hook files.

        Without ``force`` only hooks listed in the lock file are deleted.
        Deleted hooks are dropped from the lock file.
        """
        had_lock = self.lock.lock_path.exists()
        locked = self.lock.read()
        results: list[tuple[str, RemoveOutcome]] = []

        for hook in hook_names:
            hook_path = options.hooks_dir / hook

            if hook not in locked and not force:
                self.reporter.info(f"Skipped {hook} hook - not present in lock file")
                results.append((hook, RemoveOutcome.NOT_LOCKED))
                continue

            if not hook_path.is_file():
                self.reporter.info(f"{hook} hook does not exist")
                results.append((hook, RemoveOutcome.MISSING))
                continue

            hook_path.unlink()
            logger.debug("Deleted %s", hook_path)
            self.reporter.info(f"Removed {hook} hook")
            results.append((hook, RemoveOutcome.REMOVED))

        removed = {hook for hook, outcome in results if outcome is RemoveOutcome.REMOVED}
        if had_lock and removed:
            self.lock.save(h for h in locked if h not in removed)

        return results

    def status(self, hooks: HookDefinitions, options: InstallOptions) -> list[HookStatus]:
        """Report which configured hooks are installed and current."""
        locked = set(self.lock.read())
        statuses: list[HookStatus] = []

        for hook, commands in hooks.items():
            hook_path = options.hooks_dir / hook
            installed = hook_path.is_file()
            up_to_date = installed and hook_path.read_text(encoding="utf-8") == self.render(hook, commands, options)
            statuses.append(
                HookStatus(hook=hook, installed=installed, up_to_date=up_to_date, locked=hook in locked)
            )

        return statuses

    def run(self, hook: str, hooks: HookDefinitions, cwd: Optional[Path] = None) -> int:
        """
        Run the commands configured for a hook.

        Commands run in order through the shell and stop at the first
        failure.

        Returns:
            Exit code of the first failing command, or 0
        """
        if hook not in hooks:
            raise ConfigError(f"No commands configured for hook: {hook}")

        for command in hooks[hook]:
            logger.debug("Running %s hook command: %s", hook, command)
            result = subprocess.run(command, shell=True, cwd=cwd)
            if result.returncode != 0:
                return result.returncode

        return 0
