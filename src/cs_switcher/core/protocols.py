"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol


class ProcessRunner(Protocol):
    """Contract for process execution backends.

    Any object that implements :meth:`run` with the correct signature
    satisfies this protocol structurally (no explicit inheritance
    required).
    """

    def run(
        self,
        argv: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> int:
        """Run *argv* to completion and return its exit status.

        Parameters
        ----------
        argv:
            Executable followed by its arguments.  Never run through a
            shell.
        env:
            Complete child environment, or ``None`` to inherit the
            current process environment unchanged.

        Implementations must connect the child's standard streams to
        the current process's and block until the child terminates.

        Raises
        ------
        SubprocessLaunchError
            When the child cannot be started at all.
        """
        ...  # pragma: no cover
