"""Infrastructure: locate a target executable on the system PATH.

Used by the diagnostics command to report, per environment, whether
the configured target can actually be started.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ExecutableStatus:
    """Result of an executable detection probe.

    Attributes
    ----------
    name : str
        The executable name as written in the target.
    found : bool
        Whether the executable was located.
    path : Path | None
        Absolute path to the executable, or ``None``.
    """

    name: str
    found: bool
    path: Path | None

    @property
    def description(self) -> str:
        if self.found and self.path is not None:
            return f"found at {self.path}"
        return "not found"


def detect_executable(name: str) -> ExecutableStatus:
    """Probe PATH (or the literal path, if *name* has a separator) for *name*.

    Returns an :class:`ExecutableStatus` regardless of the outcome — the
    caller decides whether a miss is fatal.
    """
    result = shutil.which(name)
    if result is None:
        return ExecutableStatus(name=name, found=False, path=None)
    return ExecutableStatus(name=name, found=True, path=Path(result).resolve())
