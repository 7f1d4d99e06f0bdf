"""
Configuration management for git-hooks.

Supports:
- Environment variables
- Config file (.githooks.toml, or [tool.githooks] in pyproject.toml)
- CLI arguments (highest priority)
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import sys

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from git_hooks.errors import ConfigError
from git_hooks.models import DEFAULT_GIT_DIR, VALID_HOOKS, HookDefinitions, normalize_commands

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".githooks.toml"
PYPROJECT_FILE_NAME = "pyproject.toml"
ENV_PREFIX = "GITHOOKS_"


def parse_hooks(raw: dict[str, Any], valid_hooks: tuple[str, ...] = VALID_HOOKS) -> HookDefinitions:
    """
    Validate a hook table and normalize its commands.

    Unknown hook names are skipped with a warning.
    """
    if not isinstance(raw, dict):
        raise ConfigError("[hooks] must be a table of hook names to commands")

    hooks: HookDefinitions = {}
    for name, value in raw.items():
        if name not in valid_hooks:
            logger.warning("Ignoring unknown git hook %r", name)
            continue
        hooks[name] = normalize_commands(value)

    return hooks


@dataclass
class GitHooksConfig:
    """Configuration for git-hooks."""

    # Hook name -> commands
    hooks: HookDefinitions = field(default_factory=dict)

    # Git settings
    git_dir: str = DEFAULT_GIT_DIR

    # Hooks that abort at the first failing command
    stop_on_failure: list[str] = field(default_factory=list)

    # Directory the config file lives in; git_dir and the lock file are relative to it
    root: Path = field(default_factory=Path.cwd)

    @property
    def git_path(self) -> Path:
        return self.root / self.git_dir

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "GitHooksConfig":
        """
        Load configuration from multiple sources.

        Priority (highest to lowest):
        1. Environment variables
        2. Config file
        3. Defaults
        """
        config_dict: dict[str, Any] = {}

        # Load from config file
        if config_path is None:
            config_path = cls._find_config_file()

        if config_path and config_path.exists():
            with open(config_path, "rb") as f:
                try:
                    file_config = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ConfigError(f"Cannot parse {config_path}: {e}") from e

            if config_path.name == PYPROJECT_FILE_NAME:
                file_config = file_config.get("tool", {}).get("githooks", {})

            config_dict.update(cls._flatten_config(file_config))
            config_dict["root"] = config_path.resolve().parent

        # Load from environment variables
        env_config = cls._load_from_env()
        config_dict.update(env_config)

        return cls(**config_dict)

    @classmethod
    def _find_config_file(cls) -> Optional[Path]:
        """Find config file by walking up from current directory."""
        current = Path.cwd()

        while True:
            config_file = current / CONFIG_FILE_NAME
            if config_file.exists():
                return config_file

            pyproject = current / PYPROJECT_FILE_NAME
            if pyproject.exists() and cls._has_tool_section(pyproject):
                return pyproject

            if current == current.parent:
                return None
            current = current.parent

    @staticmethod
    def _has_tool_section(pyproject: Path) -> bool:
        with open(pyproject, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError:
                logger.warning("Cannot parse %s, ignoring it", pyproject)
                return False
        return "githooks" in data.get("tool", {})

    @classmethod
    def _flatten_config(cls, config: dict[str, Any]) -> dict[str, Any]:
        """Flatten nested config to match dataclass fields."""
        result: dict[str, Any] = {}

        if "hooks" in config:
            result["hooks"] = parse_hooks(config["hooks"])

        if "config" in config:
            settings = config["config"]
            if not isinstance(settings, dict):
                raise ConfigError("[config] must be a table")

            git_dir = settings.get("git_dir", DEFAULT_GIT_DIR)
            if not isinstance(git_dir, str):
                raise ConfigError(f"git_dir must be a string, got {git_dir!r}")
            result["git_dir"] = git_dir

            stop = settings.get("stop_on_failure", [])
            if isinstance(stop, str):
                stop = [stop]
            if not isinstance(stop, list) or not all(isinstance(h, str) for h in stop):
                raise ConfigError(f"stop_on_failure must be a list of hook names, got {stop!r}")
            result["stop_on_failure"] = stop

        return result

    @classmethod
    def _load_from_env(cls) -> dict[str, Any]:
        """Load configuration from environment variables."""
        result: dict[str, Any] = {}

        mappings = {
            "GIT_DIR": "git_dir",
            "STOP_ON_FAILURE": (
                "stop_on_failure",
                lambda x: [h.strip() for h in x.split(",") if h.strip()],
            ),
        }

        for env_suffix, mapping in mappings.items():
            env_var = f"{ENV_PREFIX}{env_suffix}"
            value = os.environ.get(env_var)

            if value is not None:
                if isinstance(mapping, tuple):
                    field_name, converter = mapping
                    result[field_name] = converter(value)
                else:
                    result[mapping] = value

        return result

    def to_toml(self) -> str:
        """Generate TOML configuration string."""
        lines = [
            "# git-hooks configuration",
            "# Generated by: githooks init",
            "",
            "[hooks]",
        ]

        if self.hooks:
            for name, commands in self.hooks.items():
                if len(commands) == 1:
                    lines.append(f"{name} = {_toml_string(commands[0])}")
                else:
                    items = ", ".join(_toml_string(c) for c in commands)
                    lines.append(f"{name} = [{items}]")
        else:
            lines.extend([
                '# pre-commit = "ruff check ."',
                '# pre-push = ["pytest -q", "mypy ."]',
            ])

        lines.extend([
            "",
            "[config]",
            f'git_dir = "{self.git_dir}"',
            f"stop_on_failure = [{', '.join(_toml_string(h) for h in self.stop_on_failure)}]",
        ])
        return "\n".join(lines)


def _toml_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
