"""Allow ``python -m cs_switcher`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cs_switcher`` behaves identically to the ``cs``
console script.
"""

from __future__ import annotations

from cs_switcher.cli.app import cli

if __name__ == "__main__":
    cli()
