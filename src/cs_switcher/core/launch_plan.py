"""Turn an :class:`Environment` into a concrete process invocation.

Pure functions only: the inherited environment is passed in by the
caller, nothing here touches the filesystem or spawns processes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cs_switcher.core.models import Environment
from cs_switcher.exceptions import EmptyTargetError, InvalidTargetError


@dataclass(frozen=True, slots=True)
class LaunchPlan:
    """Everything the process runner needs to start the child."""

    argv: tuple[str, ...]
    """Executable followed by its positional arguments."""

    env: dict[str, str] | None
    """Full child environment, or ``None`` to inherit the parent's unchanged."""

    @property
    def command_line(self) -> str:
        return " ".join(self.argv)


def split_target(target: str) -> tuple[str, ...]:
    """Split *target* on runs of whitespace.

    No shell parsing and no quoting: a token containing spaces cannot
    be expressed.

    Raises
    ------
    EmptyTargetError
        When *target* is the empty string.
    InvalidTargetError
        When *target* holds only whitespace.
    """
    if target == "":
        raise EmptyTargetError(
            "Target command is empty.",
            hint="Set a 'target' for this environment in the config file.",
        )

    tokens = tuple(target.split())
    if not tokens:
        raise InvalidTargetError(
            "Invalid target command.",
            hint="The 'target' must name an executable.",
        )
    return tokens


def overlay_environment(
    base: Mapping[str, str],
    variables: Mapping[str, str],
) -> dict[str, str] | None:
    """Return *base* with *variables* added or overwritten.

    Returns ``None`` when *variables* is empty, meaning the child should
    inherit the parent environment as-is.
    """
    if not variables:
        return None
    merged = dict(base)
    merged.update(variables)
    return merged


def build_launch_plan(
    environment: Environment,
    base_environ: Mapping[str, str],
) -> LaunchPlan:
    """Validate *environment* and build its :class:`LaunchPlan`."""
    argv = split_target(environment.target)
    env = overlay_environment(base_environ, environment.variables)
    return LaunchPlan(argv=argv, env=env)
