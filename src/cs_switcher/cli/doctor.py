"""``cs --doctor`` — configuration diagnostics command.

Gathers system information and renders a Rich table summarising
whether the configuration file loads and whether every environment's
target executable can be found.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  It never creates the
configuration file.
"""

from __future__ import annotations

import platform
import sys

from rich.markup import escape
from rich.table import Table

from cs_switcher.cli import exit_codes
from cs_switcher.cli.console import console
from cs_switcher.core.launch_plan import split_target
from cs_switcher.core.models import Configuration, Environment
from cs_switcher.exceptions import CsSwitcherError, TargetError
from cs_switcher.infra.config_store import load_config, resolve_config_path
from cs_switcher.infra.executable_detector import detect_executable
from cs_switcher.version import __version__

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"

Row = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _version_check() -> Row:
    return "cs-switcher", __version__, OK


def _python_version_check() -> Row:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    return "Python", version, OK if ok else "[red]FAIL (>=3.10 required)[/red]"


def _config_check() -> tuple[Row, Configuration | None]:
    """Return the config row and, when it loaded, the parsed configuration."""
    try:
        path = resolve_config_path()
    except CsSwitcherError as exc:
        return ("Config", str(exc), FAIL), None

    if not path.exists():
        return ("Config", f"{path} (not created yet)", WARN), None

    try:
        config = load_config(path)
    except CsSwitcherError as exc:
        return ("Config", f"{path}: {exc}", FAIL), None
    return ("Config", f"{path} ({len(config)} environments)", OK), config


def _environment_check(name: str, environment: Environment) -> Row:
    """Return (label, value, status) for one environment's target."""
    label = f"env: {name}"
    try:
        argv = split_target(environment.target)
    except TargetError as exc:
        return label, str(exc), FAIL

    status = detect_executable(argv[0])
    if status.found:
        return label, f"{argv[0]} {status.description}", OK
    return label, f"{argv[0]} {status.description}", FAIL


def collect_checks() -> list[Row]:
    """Run every diagnostic and return the table rows in display order."""
    checks = [_version_check(), _python_version_check()]
    config_row, config = _config_check()
    checks.append(config_row)
    if config is not None:
        for name in sorted(config.environments):
            checks.append(_environment_check(name, config.environments[name]))
    return checks


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a Rich summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = collect_checks()
    has_failure = any("FAIL" in status for _, _, status in checks)

    table = Table(
        title="cs doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(escape(label), escape(value), status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
