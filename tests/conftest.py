"""Pytest configuration and shared fixtures."""

import os
import stat

import pytest

from toolexec.config import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the built-in defaults, not ~/.toolexec.toml."""
    config = reset_config()
    yield config
    reset_config()


@pytest.fixture
def make_script(tmp_path):
    """Create an executable shell script and return its path."""

    def make(name, body):
        path = tmp_path / name
        path.write_text('#!/bin/sh\n' + body + '\n')
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        return str(path)

    return make


@pytest.fixture
def no_tool_overrides(monkeypatch):
    for name in ('BUNDLETOOL_PATH', 'JAVA_PATH'):
        monkeypatch.delenv(name, raising=False)
    return os.environ


@pytest.fixture(autouse=True)
def no_tty(monkeypatch):
    """Keep reports free of ANSI colors regardless of how pytest is run."""
    monkeypatch.setattr('os.isatty', lambda fd: False)
