"""Custom exception hierarchy for cs-switcher.

All exceptions that cross layer boundaries must inherit from
:class:`CsSwitcherError`.  Raw ``OSError`` and ``yaml.YAMLError``
instances must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
CsSwitcherError
├── HomeDirUnavailableError
├── ConfigError
│   ├── ConfigWriteError
│   ├── ConfigReadError
│   └── ConfigParseError
├── EnvironmentNotFoundError
├── TargetError
│   ├── EmptyTargetError
│   └── InvalidTargetError
└── SubprocessLaunchError
    └── ChildProcessFailedError
"""

from __future__ import annotations

from collections.abc import Sequence


class CsSwitcherError(Exception):
    """Base exception for all cs-switcher errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Home directory --------------------------------------------------------

class HomeDirUnavailableError(CsSwitcherError):
    """Raised when the user's home directory cannot be determined."""


# --- Configuration file ----------------------------------------------------

class ConfigError(CsSwitcherError):
    """Base class for configuration file failures."""


class ConfigWriteError(ConfigError):
    """Raised when the default configuration file cannot be written."""


class ConfigReadError(ConfigError):
    """Raised when an existing configuration file cannot be read."""


class ConfigParseError(ConfigError):
    """Raised when the configuration is not valid YAML or has the wrong shape."""


# --- Environment lookup ----------------------------------------------------

class EnvironmentNotFoundError(CsSwitcherError):
    """Raised when no environment with the requested name is configured."""

    def __init__(
        self,
        name: str,
        available: Sequence[str] = (),
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"Environment '{name}' not found.", hint=hint)
        self.name: str = name
        self.available: tuple[str, ...] = tuple(available)


# --- Target command --------------------------------------------------------

class TargetError(CsSwitcherError):
    """Base class for unusable ``target`` command lines."""


class EmptyTargetError(TargetError):
    """Raised when an environment's target is the empty string."""


class InvalidTargetError(TargetError):
    """Raised when a target contains no tokens after whitespace splitting."""


# --- Child process ---------------------------------------------------------

class SubprocessLaunchError(CsSwitcherError):
    """Raised when the target command cannot be started."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.command: str | None = command


class ChildProcessFailedError(SubprocessLaunchError):
    """Raised when the target command ran but exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int,
        command: str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, command=command, hint=hint)
        self.exit_code: int = exit_code
