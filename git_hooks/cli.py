"""
CLI for git-hooks.

Commands:
    githooks add        Add configured hooks
    githooks update     Rewrite configured hooks
    githooks remove     Remove hooks
    githooks list       Show installed hooks
    githooks run        Run the commands of a hook
    githooks init       Initialize configuration
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from git_hooks import __version__
from git_hooks.config import CONFIG_FILE_NAME, GitHooksConfig
from git_hooks.errors import GitHooksError
from git_hooks.hooks.install import HookInstaller
from git_hooks.hooks.lock import LockFileManager
from git_hooks.models import InstallOptions
from git_hooks.reporter import ConsoleReporter

console = Console()


def git_dir_option(func: Callable) -> Callable:
    return click.option(
        "--git-dir",
        type=str,
        help="Path to the git directory (default: from config, then .git)",
    )(func)


def config_option(func: Callable) -> Callable:
    return click.option(
        "--config",
        type=click.Path(exists=True, dir_okay=False),
        help="Path to config file",
    )(func)


def _load_config(config: str | None) -> GitHooksConfig:
    return GitHooksConfig.load(Path(config) if config else None)


def _git_dir(git_dir: str | None, cfg: GitHooksConfig) -> str:
    """Resolve --git-dir against the cwd, the configured one against the config file."""
    return git_dir if git_dir else str(cfg.git_path)


def _installer(cfg: GitHooksConfig) -> HookInstaller:
    reporter = ConsoleReporter(console)
    return HookInstaller(reporter, lock=LockFileManager(reporter, root=cfg.root))


def _run_guarded(action: Callable[[], None]) -> None:
    """Run a command body, turning expected failures into exit code 1."""
    try:
        action()
    except (ValueError, GitHooksError) as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="githooks")
def main() -> None:
    """Git Hooks - Manage git hooks from a config file."""
    pass


@main.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing hooks",
)
@click.option(
    "--force-win",
    is_flag=True,
    help="Add the Windows bash shebang regardless of the host OS",
)
@click.option(
    "--no-lock",
    is_flag=True,
    help="Do not create a lock file",
)
@click.option(
    "--ignore-lock",
    is_flag=True,
    help="Add the lock file to .gitignore",
)
@git_dir_option
@config_option
def add(
    force: bool,
    force_win: bool,
    no_lock: bool,
    ignore_lock: bool,
    git_dir: str | None,
    config: str | None,
) -> None:
    """Add configured hooks that are not installed yet."""

    def action() -> None:
        cfg = _load_config(config)
        options = InstallOptions(
            force=force,
            force_windows=force_win,
            git_dir=_git_dir(git_dir, cfg),
            skip_lock=no_lock,
            ignore_lock=ignore_lock,
            stop_on_failure=tuple(cfg.stop_on_failure),
        )
        _installer(cfg).install(cfg.hooks, options)

    _run_guarded(action)


@main.command()
@click.option(
    "--force-win",
    is_flag=True,
    help="Add the Windows bash shebang regardless of the host OS",
)
@click.option(
    "--no-lock",
    is_flag=True,
    help="Do not create a lock file",
)
@click.option(
    "--ignore-lock",
    is_flag=True,
    help="Add the lock file to .gitignore",
)
@git_dir_option
@config_option
def update(
    force_win: bool,
    no_lock: bool,
    ignore_lock: bool,
    git_dir: str | None,
    config: str | None,
) -> None:
    """Rewrite all configured hooks."""

    def action() -> None:
        cfg = _load_config(config)
        options = InstallOptions(
            force=True,
            force_windows=force_win,
            git_dir=_git_dir(git_dir, cfg),
            skip_lock=no_lock,
            ignore_lock=ignore_lock,
            stop_on_failure=tuple(cfg.stop_on_failure),
        )
        _installer(cfg).update(cfg.hooks, options)

    _run_guarded(action)


@main.command()
@click.argument("hooks", nargs=-1)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Remove hooks even if they are not in the lock file",
)
@git_dir_option
@config_option
def remove(hooks: tuple[str, ...], force: bool, git_dir: str | None, config: str | None) -> None:
    """Remove hooks (default: all configured hooks)."""

    def action() -> None:
        cfg = _load_config(config)
        options = InstallOptions(git_dir=_git_dir(git_dir, cfg))
        names = list(hooks) if hooks else list(cfg.hooks)
        if not names:
            console.print("[yellow]No hooks to remove[/yellow]")
            return
        _installer(cfg).remove(names, options, force=force)

    _run_guarded(action)


@main.command(name="list")
@git_dir_option
@config_option
def list_hooks(git_dir: str | None, config: str | None) -> None:
    """Show configured hooks and their installation state."""

    def action() -> None:
        cfg = _load_config(config)
        options = InstallOptions(
            git_dir=_git_dir(git_dir, cfg),
            stop_on_failure=tuple(cfg.stop_on_failure),
        )
        statuses = _installer(cfg).status(cfg.hooks, options)

        if not statuses:
            console.print(f"[yellow]No hooks configured.[/yellow] Add them to {CONFIG_FILE_NAME}")
            return

        table = Table(title="Git Hooks")
        table.add_column("Hook", style="cyan")
        table.add_column("Status", style="white")
        table.add_column("Locked", style="green")

        for s in statuses:
            if not s.installed:
                state = "[red]missing[/red]"
            elif s.up_to_date:
                state = "[green]installed[/green]"
            else:
                state = "[yellow]outdated[/yellow]"
            table.add_row(s.hook, state, "✓" if s.locked else "[yellow]○[/yellow]")

        console.print(table)

    _run_guarded(action)


@main.command()
@click.argument("hook")
@config_option
def run(hook: str, config: str | None) -> None:
    """Run the commands configured for HOOK."""
    code = 0

    def action() -> None:
        nonlocal code
        cfg = _load_config(config)
        code = _installer(cfg).run(hook, cfg.hooks, cwd=cfg.root)

    _run_guarded(action)
    if code:
        console.print(f"[red]{hook} hook failed with exit code {code}[/red]")
        sys.exit(code)


@main.command()
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite existing configuration",
)
def init(force: bool) -> None:
    """Initialize git-hooks configuration."""
    config_path = Path(CONFIG_FILE_NAME)

    if config_path.exists() and not force:
        console.print(
            f"[yellow]Configuration file already exists:[/yellow] {config_path}\n"
            "Use --force to overwrite."
        )
        sys.exit(1)

    config = GitHooksConfig()
    config_path.write_text(config.to_toml() + "\n")

    console.print(
        Panel(
            f"[green]✓[/green] Created configuration file: [bold]{config_path}[/bold]\n\n"
            "Next steps:\n"
            "1. Add commands under [dim]\\[hooks][/dim] in the config file\n"
            "2. Run [bold]githooks add[/bold] to install them",
            title="Git Hooks Initialized",
            border_style="green",
        )
    )


if __name__ == "__main__":
    main()
