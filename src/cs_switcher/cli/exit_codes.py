"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — the target ran and exited with status 0."""

GENERAL_ERROR: int = 1
"""A known CsSwitcherError was caught, or no/unknown environment was given."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C before the target started.  128 + SIGINT=2.

Once the target is running, Ctrl+C belongs to it: ``SubprocessRunner._wait``
absorbs the interrupt and the exit status comes from the child instead.
"""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
