"""Tests for target tokenization and environment overlay (core/launch_plan.py).

Pure functions — no processes are spawned here.
"""

from __future__ import annotations

import pytest

from cs_switcher.core.launch_plan import (
    LaunchPlan,
    build_launch_plan,
    overlay_environment,
    split_target,
)
from cs_switcher.core.models import Environment
from cs_switcher.exceptions import EmptyTargetError, InvalidTargetError


# ---------------------------------------------------------------------------
# split_target
# ---------------------------------------------------------------------------

class TestSplitTarget:
    def test_empty_string(self) -> None:
        with pytest.raises(EmptyTargetError):
            split_target("")

    @pytest.mark.parametrize("target", ["   ", "\t", " \n "])
    def test_whitespace_only(self, target: str) -> None:
        with pytest.raises(InvalidTargetError):
            split_target(target)

    def test_single_executable(self) -> None:
        assert split_target("claude") == ("claude",)

    def test_arguments_in_order(self) -> None:
        assert split_target("echo hello world") == ("echo", "hello", "world")

    def test_runs_of_whitespace_collapse(self) -> None:
        assert split_target("  node   server.js\t--port  3000 ") == (
            "node",
            "server.js",
            "--port",
            "3000",
        )

    def test_no_quote_handling(self) -> None:
        assert split_target('echo "a b"') == ("echo", '"a', 'b"')

    def test_no_shell_expansion(self) -> None:
        assert split_target("echo $HOME ~") == ("echo", "$HOME", "~")


# ---------------------------------------------------------------------------
# overlay_environment
# ---------------------------------------------------------------------------

class TestOverlayEnvironment:
    def test_empty_variables_means_inherit(self) -> None:
        assert overlay_environment({"A": "1"}, {}) is None

    def test_adds_new_keys(self) -> None:
        merged = overlay_environment({"A": "1"}, {"B": "2"})
        assert merged == {"A": "1", "B": "2"}

    def test_override_wins(self) -> None:
        merged = overlay_environment({"PATH": "/usr/bin", "A": "1"}, {"PATH": "/custom"})
        assert merged == {"PATH": "/custom", "A": "1"}

    def test_base_not_mutated(self) -> None:
        base = {"A": "1"}
        overlay_environment(base, {"A": "2"})
        assert base == {"A": "1"}


# ---------------------------------------------------------------------------
# build_launch_plan
# ---------------------------------------------------------------------------

class TestBuildLaunchPlan:
    def test_plan_fields(self) -> None:
        plan = build_launch_plan(
            Environment(target="echo hello", variables={"TEST_VAR": "x"}),
            {"HOME": "/home/me"},
        )
        assert plan == LaunchPlan(
            argv=("echo", "hello"),
            env={"HOME": "/home/me", "TEST_VAR": "x"},
        )
        assert plan.command_line == "echo hello"

    def test_inherit_when_no_variables(self) -> None:
        plan = build_launch_plan(Environment(target="pwd"), {"HOME": "/home/me"})
        assert plan.env is None

    def test_empty_target_checked_first(self) -> None:
        with pytest.raises(EmptyTargetError):
            build_launch_plan(Environment(target="", variables={"A": "1"}), {})

    def test_whitespace_target(self) -> None:
        with pytest.raises(InvalidTargetError):
            build_launch_plan(Environment(target="   "), {})
