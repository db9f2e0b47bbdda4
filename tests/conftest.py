"""Shared pytest fixtures for djsh tests."""

import pytest

from djsh.log import configure_logging
from djsh.session import Session
from djsh.shell import Shell


@pytest.fixture(autouse=True)
def _quiet_logging():
    configure_logging(verbose=False)


@pytest.fixture
def session():
    return Session()


@pytest.fixture
def shell(session):
    return Shell(session)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside tmp_path; the original cwd comes back afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def bindir(tmp_path):
    """Directory of small executable scripts to put on the search path."""
    d = tmp_path / "bin"
    d.mkdir()
    return d


def make_script(directory, name, body, mode=0o755):
    script = directory / name
    script.write_text("#!/bin/sh\n" + body + "\n")
    script.chmod(mode)
    return script
