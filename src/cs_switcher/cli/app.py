"""CLI application entry point and command routing for cs-switcher.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cs_switcher.exceptions.CsSwitcherError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* ``print()`` is forbidden; the Rich console is used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from cs_switcher.cli import exit_codes
from cs_switcher.cli.console import console
from cs_switcher.exceptions import (
    ChildProcessFailedError,
    CsSwitcherError,
    EnvironmentNotFoundError,
)
from cs_switcher.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cs <environment>`` — run the environment's target
    * ``cs``               — usage plus the list of environments
    * ``cs --doctor``      — environment diagnostics
    * ``cs --version``
    """
    parser = argparse.ArgumentParser(
        prog="cs",
        description="Launch a command with a named set of environment variables.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the configuration and every environment's target.",
    )
    parser.add_argument(
        "environment",
        nargs="?",
        default=None,
        help="Name of the environment to run (see ~/.cs/config.yaml).",
    )
    return parser


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _announce_created(path: Path) -> None:
    console.print(f"Created default configuration file: {escape(str(path))}")
    console.print("Please edit the file to add your environment configurations.")


def _print_names(names: Sequence[str]) -> None:
    console.print("Available environments:")
    if not names:
        console.print("  [dim](none defined)[/dim]")
    for name in names:
        console.print(f"  {escape(name)}")


def _print_available_environments() -> None:
    """List configured environments, reporting rather than raising on failure."""
    from cs_switcher.core.resolver import list_names
    from cs_switcher.infra.config_store import load_config, resolve_config_path

    try:
        config = load_config(resolve_config_path(), on_create=_announce_created)
    except CsSwitcherError as exc:
        console.print("Available environments:")
        console.print(f"  (Unable to load config: {escape(str(exc))})")
        return
    _print_names(list_names(config))


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_usage(parser: argparse.ArgumentParser) -> int:
    """No environment given: show usage and what can be selected."""
    console.print(escape(parser.format_usage().rstrip()))
    _print_available_environments()
    return exit_codes.GENERAL_ERROR


def _handle_run(name: str) -> int:
    """Load the config, resolve *name*, and run its target.

    Flow:
    1. Locate (and on first run create) the configuration file.
    2. Look up the environment by exact name.
    3. Launch the target with the variable overlay and wait for it.
    """
    from cs_switcher.core.launch_service import LaunchService
    from cs_switcher.core.resolver import lookup
    from cs_switcher.infra.config_store import load_config, resolve_config_path
    from cs_switcher.infra.subprocess_runner import SubprocessRunner

    config = load_config(resolve_config_path(), on_create=_announce_created)

    try:
        environment = lookup(config, name)
    except EnvironmentNotFoundError as exc:
        console.print(escape(str(exc)))
        _print_names(exc.available)
        return exit_codes.GENERAL_ERROR

    LaunchService(SubprocessRunner()).run(environment)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from cs_switcher.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cs CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        return _handle_doctor()

    if args.environment is None:
        return _handle_usage(parser)

    return _handle_run(args.environment)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def exit_code_for(exc: CsSwitcherError) -> int:
    """Map a domain error to the process exit code.

    A target that ran and failed hands its own status back to the shell.
    """
    if isinstance(exc, ChildProcessFailedError) and exc.exit_code > 0:
        return exc.exit_code
    return exit_codes.GENERAL_ERROR


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CsSwitcherError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_code_for(exc))
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
