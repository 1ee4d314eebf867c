"""Shared pytest fixtures and configuration for the cs-switcher test suite.

Guidelines
----------
* No test touches the real ``~/.cs`` directory — ``fake_home`` points
  the home directory at ``tmp_path``.
* Child processes are mocked at the runner boundary unless a test is
  explicitly about spawning.
"""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_CONFIG = """\
environments:
  testenv:
    target: "echo hello"
    environment:
      TEST_VAR: test_value
  another:
    target: "pwd"
    environment:
      PATH: /custom/path
"""


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the user's home directory to a temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home


@pytest.fixture
def config_path(fake_home: Path) -> Path:
    """Location of the config file inside ``fake_home`` (not yet created)."""
    return fake_home / ".cs" / "config.yaml"


@pytest.fixture
def write_config(config_path: Path):
    """Return a helper writing *content* to the config file."""

    def _write(content: str) -> Path:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(content, encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def sample_config(write_config) -> Path:
    """Write the two-environment sample document and return its path."""
    return write_config(SAMPLE_CONFIG)
