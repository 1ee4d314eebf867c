"""Shared Rich console for all user-facing output.

Everything the tool itself says goes to stderr so the child's stdout
stays clean.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True, highlight=False, soft_wrap=True)
