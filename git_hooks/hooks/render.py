"""
Hook script rendering.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, Sequence

SHEBANG = "#!/bin/bash"
STOP_ON_FAILURE = "set -e"


def host_needs_shebang_compat() -> bool:
    """Check whether hook scripts need an explicit bash shebang on this host."""
    return os.name == "nt" or sys.platform.startswith(("win", "cygwin", "msys"))


def needs_shebang(
    force_windows: bool = False,
    host_check: Callable[[], bool] = host_needs_shebang_compat,
) -> bool:
    return force_windows or host_check()


def render_script(
    commands: Sequence[str],
    windows_shebang: bool = False,
    stop_on_failure: bool = False,
) -> str:
    """
    Build the content of a hook file.

    Args:
        commands: Shell commands, written one per line in order
        windows_shebang: Start the script with ``#!/bin/bash``
        stop_on_failure: Abort the hook at the first failing command

    Returns:
        Script text without a trailing newline
    """
    lines: list[str] = []
    if windows_shebang:
        lines.append(SHEBANG)
    if stop_on_failure:
        lines.append(STOP_ON_FAILURE)
    lines.extend(str(command) for command in commands)
    return "\n".join(lines)
