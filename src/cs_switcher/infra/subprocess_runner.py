"""``subprocess`` backed implementation of :class:`~cs_switcher.core.protocols.ProcessRunner`.

This module is the **only** place in the codebase that starts child
processes.  ``OSError`` raised while spawning is caught here and
re-raised as :class:`~cs_switcher.exceptions.SubprocessLaunchError`.
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping, Sequence

from cs_switcher.exceptions import SubprocessLaunchError


class SubprocessRunner:
    """Concrete :class:`ProcessRunner` that inherits the terminal.

    stdin, stdout and stderr are left unset so the child shares the
    parent's streams directly.
    """

    def run(
        self,
        argv: Sequence[str],
        env: Mapping[str, str] | None = None,
    ) -> int:
        """Run *argv* and return its exit status.

        A child killed by signal ``N`` is reported as ``128 + N``.

        Raises
        ------
        SubprocessLaunchError
            When the executable is missing, not executable, or cannot
            be started for any other OS-level reason.
        """
        command = " ".join(argv)
        try:
            process = subprocess.Popen(
                list(argv),
                env=None if env is None else dict(env),
                shell=False,
            )
        except FileNotFoundError as exc:
            raise SubprocessLaunchError(
                f"Command not found: {argv[0]}",
                command=command,
                hint="Check the environment's 'target' and your PATH.",
            ) from exc
        except PermissionError as exc:
            raise SubprocessLaunchError(
                f"Permission denied running: {argv[0]}",
                command=command,
            ) from exc
        except OSError as exc:
            raise SubprocessLaunchError(
                f"Failed to run command '{command}': {exc}",
                command=command,
            ) from exc

        returncode = self._wait(process)
        if returncode < 0:
            return 128 - returncode
        return returncode

    @staticmethod
    def _wait(process: subprocess.Popen[bytes]) -> int:
        # Ctrl+C reaches the child through the terminal; it decides when to exit.
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                continue
