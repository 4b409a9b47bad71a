"""Shared test fixtures for docpass."""

import json
import logging

import pytest

from docpass.config.models import AgentConfig, DocpassConfig


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path, monkeypatch):
    """Keep a real ~/.config/docpass/config.yaml out of the tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A project root that CURSOR_PROJECT_DIR points at."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.setenv("CURSOR_PROJECT_DIR", str(root))
    return root.resolve()


@pytest.fixture
def edits_file(project):
    return project / ".cursor" / "hooks" / "docs" / "state" / "edits.json"


@pytest.fixture
def read_edits(edits_file):
    def _read():
        return json.loads(edits_file.read_text())

    return _read


@pytest.fixture
def agent_options():
    return AgentConfig()


@pytest.fixture
def sample_config():
    return DocpassConfig()


@pytest.fixture(autouse=True)
def _reset_docpass_logger():
    """The CLI attaches a stderr handler to the docpass logger; undo it per test."""
    pkg_logger = logging.getLogger("docpass")
    handlers = list(pkg_logger.handlers)
    level = pkg_logger.level
    yield
    pkg_logger.handlers = handlers
    pkg_logger.setLevel(level)
