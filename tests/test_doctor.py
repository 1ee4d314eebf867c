"""Tests for the ``cs --doctor`` command (cli/doctor.py).

Executable lookup is mocked — no dependency on what is on PATH.

Coverage:
* Individual check functions return correct tuples.
* Missing config is reported without being created.
* A broken config or unresolvable target makes the doctor fail.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cs_switcher.cli import exit_codes
from cs_switcher.cli.doctor import (
    _config_check,
    _environment_check,
    _python_version_check,
    collect_checks,
    run_doctor,
)
from cs_switcher.core.models import Environment
from cs_switcher.infra.executable_detector import ExecutableStatus


def _found(name: str) -> ExecutableStatus:
    return ExecutableStatus(name=name, found=True, path=Path(f"/usr/bin/{name}"))


def _missing(name: str) -> ExecutableStatus:
    return ExecutableStatus(name=name, found=False, path=None)


class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestConfigCheck:
    def test_missing_config_is_warning(self, config_path: Path) -> None:
        (label, value, status), config = _config_check()
        assert label == "Config"
        assert "not created yet" in value
        assert "WARN" in status
        assert config is None
        assert not config_path.exists()

    def test_loaded(self, sample_config: Path) -> None:
        (_, value, status), config = _config_check()
        assert "2 environments" in value
        assert "OK" in status
        assert config is not None

    def test_parse_error_fails(self, write_config) -> None:
        write_config("- not\n- a mapping\n")
        (_, _, status), config = _config_check()
        assert "FAIL" in status
        assert config is None


class TestEnvironmentCheck:
    @patch("cs_switcher.cli.doctor.detect_executable", side_effect=_found)
    def test_found(self, _mock: MagicMock) -> None:
        label, value, status = _environment_check("glm", Environment(target="claude"))
        assert label == "env: glm"
        assert "claude" in value
        assert "OK" in status

    @patch("cs_switcher.cli.doctor.detect_executable", side_effect=_missing)
    def test_missing(self, _mock: MagicMock) -> None:
        _, value, status = _environment_check("glm", Environment(target="claude"))
        assert "not found" in value
        assert "FAIL" in status

    def test_empty_target(self) -> None:
        _, value, status = _environment_check("bare", Environment(target=""))
        assert "empty" in value
        assert "FAIL" in status


class TestRunDoctor:
    @patch("cs_switcher.cli.doctor.detect_executable", side_effect=_found)
    def test_all_ok(
        self,
        _mock: MagicMock,
        sample_config: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_doctor() == exit_codes.SUCCESS
        err = capsys.readouterr().err
        assert "testenv" in err
        assert "All checks passed." in err

    @patch("cs_switcher.cli.doctor.detect_executable", side_effect=_missing)
    def test_missing_target_fails(
        self,
        _mock: MagicMock,
        sample_config: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert run_doctor() == exit_codes.GENERAL_ERROR
        assert "Some checks failed." in capsys.readouterr().err

    def test_without_config_passes(self, config_path: Path) -> None:
        assert run_doctor() == exit_codes.SUCCESS
        assert not config_path.exists()

    @patch("cs_switcher.cli.doctor.detect_executable", side_effect=_found)
    def test_rows_in_order(self, _mock: MagicMock, sample_config: Path) -> None:
        labels = [label for label, _, _ in collect_checks()]
        assert labels == ["cs-switcher", "Python", "Config", "env: another", "env: testenv"]
