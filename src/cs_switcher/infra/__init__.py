"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, PyYAML, and the
operating system's process machinery.  Every raw ``OSError`` or
``yaml.YAMLError`` must be caught here and re-raised as a
:class:`~cs_switcher.exceptions.CsSwitcherError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cs_switcher.infra.config_store import (
    DEFAULT_CONFIG,
    load_config,
    parse_config,
    resolve_config_path,
)
from cs_switcher.infra.executable_detector import ExecutableStatus, detect_executable
from cs_switcher.infra.subprocess_runner import SubprocessRunner

__all__: list[str] = [
    "DEFAULT_CONFIG",
    "ExecutableStatus",
    "SubprocessRunner",
    "detect_executable",
    "load_config",
    "parse_config",
    "resolve_config_path",
]
