"""Core launch service — runs an environment's target command.

This service delegates process creation to a
:class:`~cs_switcher.core.protocols.ProcessRunner` injected at
construction time.  It is responsible for:

* Validating and tokenizing the target.
* Overlaying the configured variables on the inherited environment.
* Turning a non-zero exit status into
  :class:`~cs_switcher.exceptions.ChildProcessFailedError`.
* Ensuring only :class:`~cs_switcher.exceptions.CsSwitcherError`
  subclasses escape.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from cs_switcher.core.launch_plan import LaunchPlan, build_launch_plan
from cs_switcher.core.models import Environment
from cs_switcher.core.protocols import ProcessRunner
from cs_switcher.exceptions import (
    ChildProcessFailedError,
    CsSwitcherError,
    SubprocessLaunchError,
)


class LaunchService:
    """Stateless service that drives a single synchronous launch.

    Parameters
    ----------
    runner:
        Any object satisfying the :class:`ProcessRunner` protocol.
    base_environ:
        Environment the overlay is applied to.  Defaults to the live
        ``os.environ``.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        base_environ: Mapping[str, str] | None = None,
    ) -> None:
        self._runner: ProcessRunner = runner
        self._base_environ: Mapping[str, str] = (
            os.environ if base_environ is None else base_environ
        )

    def plan(self, environment: Environment) -> LaunchPlan:
        """Build the :class:`LaunchPlan` for *environment* without running it."""
        return build_launch_plan(environment, self._base_environ)

    def run(self, environment: Environment) -> None:
        """Run *environment*'s target and block until it terminates.

        Raises
        ------
        EmptyTargetError, InvalidTargetError
            When the target is unusable.
        SubprocessLaunchError
            When the target cannot be started.
        ChildProcessFailedError
            When the target exits with a non-zero status.
        """
        plan = self.plan(environment)
        try:
            exit_code = self._runner.run(plan.argv, plan.env)
        except CsSwitcherError:
            # Already typed; propagate unchanged.
            raise
        except Exception as exc:
            raise SubprocessLaunchError(
                f"Unexpected error running '{plan.command_line}': {exc}",
                command=plan.command_line,
            ) from exc

        if exit_code != 0:
            raise ChildProcessFailedError(
                f"Command '{plan.command_line}' exited with status {exit_code}.",
                exit_code=exit_code,
                command=plan.command_line,
            )
