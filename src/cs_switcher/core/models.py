"""Domain models for cs-switcher.

All models are **frozen** dataclasses — value objects with no behaviour
beyond data access.  They carry zero I/O and zero dependencies on
external packages.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Environment record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Environment:
    """A named pair of target command and variable overlay."""

    target: str = ""
    """Shell-less command line: executable plus space-separated arguments."""

    variables: dict[str, str] = field(default_factory=dict)
    """Variables added to (or overwriting) the inherited environment."""


# ---------------------------------------------------------------------------
# Whole configuration file
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """Parsed contents of the configuration file.

    ``environments`` is never ``None``; an absent section is represented
    by an empty mapping.
    """

    environments: dict[str, Environment] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.environments)

    def __contains__(self, name: object) -> bool:
        return name in self.environments
