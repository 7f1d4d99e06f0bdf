"""
Tests for the lock file manager.
"""

import pytest

from git_hooks.errors import LockFileError
from git_hooks.hooks.lock import IGNORE_FILE, LOCK_FILE, LockFileManager
from git_hooks.models import InstallOptions


class RecordingReporter:
    def __init__(self):
        self.lines = []

    def info(self, message):
        self.lines.append(message)

    def error(self, message):
        self.lines.append(message)


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def manager(tmp_path, reporter):
    return LockFileManager(reporter, root=tmp_path)


class TestWrite:
    """Tests for writing the lock file."""

    def test_writes_json_array(self, tmp_path, manager, reporter):
        manager.write(["pre-commit", "pre-push"], InstallOptions())

        assert (tmp_path / LOCK_FILE).read_text() == '["pre-commit","pre-push"]'
        assert f"Created {LOCK_FILE} file" in reporter.lines

    def test_skip_lock(self, tmp_path, manager, reporter):
        manager.write(["pre-commit"], InstallOptions(skip_lock=True))

        assert not (tmp_path / LOCK_FILE).exists()
        assert f"Skipped creating a {LOCK_FILE} file" in reporter.lines

    def test_does_not_touch_gitignore_by_default(self, tmp_path, manager, reporter):
        (tmp_path / IGNORE_FILE).write_text("vendor/\n")

        manager.write(["pre-commit"], InstallOptions())

        assert f"Skipped adding {LOCK_FILE} to .gitignore" in reporter.lines
        assert LOCK_FILE not in (tmp_path / IGNORE_FILE).read_text()

    def test_ignore_lock_appends_to_gitignore(self, tmp_path, manager, reporter):
        (tmp_path / IGNORE_FILE).write_text("vendor/")

        manager.write(["pre-commit"], InstallOptions(ignore_lock=True))

        assert (tmp_path / IGNORE_FILE).read_text() == f"vendor/\n{LOCK_FILE}\n"
        assert f"Added {LOCK_FILE} to .gitignore" in reporter.lines

    def test_ignore_lock_creates_gitignore(self, tmp_path, manager):
        manager.write(["pre-commit"], InstallOptions(ignore_lock=True))

        assert (tmp_path / IGNORE_FILE).read_text() == f"{LOCK_FILE}\n"

    def test_ignore_lock_does_not_duplicate_entry(self, tmp_path, manager):
        (tmp_path / IGNORE_FILE).write_text(f"{LOCK_FILE}\n")

        manager.write(["pre-commit"], InstallOptions(ignore_lock=True))

        assert (tmp_path / IGNORE_FILE).read_text().count(LOCK_FILE) == 1


class TestRead:
    """Tests for reading the lock file."""

    def test_missing_lock_file(self, manager):
        assert manager.read() == []

    def test_reads_hook_names(self, tmp_path, manager):
        (tmp_path / LOCK_FILE).write_text('["pre-commit","commit-msg"]')

        assert manager.read() == ["pre-commit", "commit-msg"]

    def test_invalid_json(self, tmp_path, manager):
        (tmp_path / LOCK_FILE).write_text("{not json")

        with pytest.raises(LockFileError):
            manager.read()

    def test_wrong_shape(self, tmp_path, manager):
        (tmp_path / LOCK_FILE).write_text('{"pre-commit": true}')

        with pytest.raises(LockFileError):
            manager.read()
