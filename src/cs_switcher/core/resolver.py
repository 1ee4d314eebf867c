"""Environment lookup against a parsed :class:`Configuration`."""

from __future__ import annotations

from cs_switcher.core.models import Configuration, Environment
from cs_switcher.exceptions import EnvironmentNotFoundError


def list_names(config: Configuration) -> list[str]:
    """Return every environment name defined in *config*, sorted."""
    return sorted(config.environments)


def lookup(config: Configuration, name: str) -> Environment:
    """Return the environment called *name* (exact, case-sensitive match).

    Raises
    ------
    EnvironmentNotFoundError
        When *name* is not defined.  The exception carries the list of
        available names so the caller can guide the user.
    """
    try:
        return config.environments[name]
    except KeyError:
        raise EnvironmentNotFoundError(name, list_names(config)) from None
