"""Shared fixtures and utilities for bootstrap tests."""

import logging
import os
import stat
import sys
import tempfile

import pytest
from git import Repo
from rich.logging import RichHandler

from cargo_bootstrap.log_context import LOGGER_NAME, LogContext

# Ensure tests/bootstrap/ is on sys.path so test files can import the
# fakes unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_git_repository import FakeGitRepository  # noqa: E402, F401
from recording_launcher import RecordingLauncher  # noqa: E402, F401

# Stands in for cargo: `new` creates the directory with a git repo and a
# manifest, `build` writes a lock file.
FAKE_CARGO_SCRIPT = """#!/bin/sh
set -e
case "$1" in
  new)
    for last in "$@"; do :; done
    mkdir -p "$last"
    git init -q "$last"
    printf '[package]\\nname = "fake"\\n' > "$last/Cargo.toml"
    ;;
  build)
    echo "# fake lock" > Cargo.lock
    ;;
  *)
    exit 3
    ;;
esac
"""


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def fake_repo():
    return FakeGitRepository()


@pytest.fixture
def log_context():
    return LogContext.for_tests()


@pytest.fixture
def fake_cargo():
    """Write the fake cargo script to a temp dir and return its path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        script = os.path.join(tmpdir, "cargo")
        with open(script, "w") as f:
            f.write(FAKE_CARGO_SCRIPT)
        os.chmod(script, os.stat(script).st_mode | stat.S_IXUSR)
        yield script


@pytest.fixture
def git_identity(monkeypatch):
    """Give git a committer identity without touching user config."""
    for prefix in ("GIT_AUTHOR", "GIT_COMMITTER"):
        monkeypatch.setenv(f"{prefix}_NAME", "Test")
        monkeypatch.setenv(f"{prefix}_EMAIL", "test@test.com")


def commit_messages(path):
    """Return commit messages of the repo at *path*, oldest first."""
    repo = Repo(path)
    return [c.message.strip() for c in reversed(list(repo.iter_commits()))]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop console handlers and levels a test's LogContext installed."""
    yield
    for name in list(logging.root.manager.loggerDict):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, RichHandler):
                logger.removeHandler(handler)
        if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
            logger.setLevel(logging.NOTSET)
    logging.getLogger("git").setLevel(logging.NOTSET)
