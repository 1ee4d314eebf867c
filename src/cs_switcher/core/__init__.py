"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from cs_switcher.core.launch_plan import LaunchPlan, build_launch_plan
from cs_switcher.core.launch_service import LaunchService
from cs_switcher.core.models import Configuration, Environment
from cs_switcher.core.protocols import ProcessRunner
from cs_switcher.core.resolver import list_names, lookup

__all__: list[str] = [
    "Configuration",
    "Environment",
    "LaunchPlan",
    "LaunchService",
    "ProcessRunner",
    "build_launch_plan",
    "list_names",
    "lookup",
]
