"""
Tests for hook script rendering.
"""

import sys
from unittest.mock import patch

from git_hooks.hooks.render import host_needs_shebang_compat, needs_shebang, render_script


def test_render_joins_commands():
    assert render_script(["echo one", "echo two"]) == "echo one\necho two"


def test_render_shebang_is_first_line():
    content = render_script(["echo hi"], windows_shebang=True)

    assert content.startswith("#!/bin/bash\n")
    assert content == "#!/bin/bash\necho hi"


def test_render_empty_commands():
    assert render_script([]) == ""
    assert render_script([], windows_shebang=True) == "#!/bin/bash"


def test_render_stop_on_failure_follows_shebang():
    content = render_script(["pytest"], windows_shebang=True, stop_on_failure=True)

    assert content == "#!/bin/bash\nset -e\npytest"


def test_needs_shebang_is_either_forced_or_detected():
    assert needs_shebang(False, lambda: False) is False
    assert needs_shebang(True, lambda: False) is True
    assert needs_shebang(False, lambda: True) is True
    assert needs_shebang(True, lambda: True) is True


def test_host_detection_on_windows():
    with patch.object(sys, "platform", "win32"):
        assert host_needs_shebang_compat() is True


def test_host_detection_on_linux():
    with patch("git_hooks.hooks.render.os.name", "posix"), patch.object(sys, "platform", "linux"):
        assert host_needs_shebang_compat() is False
