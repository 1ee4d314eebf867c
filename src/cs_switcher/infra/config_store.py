"""Infrastructure: per-user configuration file.

Locates ``~/.cs/config.yaml``, writes the default document on first
run, and parses the YAML into a :class:`Configuration`.

Rules
-----
* Parsing via :class:`LiteralLoader` only — scalars keep their literal text.
* An existing file is never overwritten.
* No ``print()`` — the first-run notice goes through ``on_create``.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from cs_switcher.core.models import Configuration, Environment
from cs_switcher.exceptions import (
    ConfigParseError,
    ConfigReadError,
    ConfigWriteError,
    HomeDirUnavailableError,
)

CONFIG_DIR_NAME: str = ".cs"
CONFIG_FILE_NAME: str = "config.yaml"

DEFAULT_ENVIRONMENT: str = "glm"

DEFAULT_CONFIG: str = """\
# cs-switcher configuration
# Each entry under 'environments' is selected with: cs <name>

environments:
  # Claude Code routed through the GLM Anthropic-compatible endpoint
  glm:
    target: "claude"  # command to launch
    environment:
      CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC: "1"
      ANTHROPIC_BASE_URL: "https://open.bigmodel.cn/api/anthropic"
      ANTHROPIC_AUTH_TOKEN: "your-glm-api-key"
      ANTHROPIC_MODEL: "glm-4.6"
      ANTHROPIC_SMALL_FAST_MODEL: "glm-4.5-air"
      ANTHROPIC_DEFAULT_SONNET_MODEL: "glm-4.6"
      ANTHROPIC_DEFAULT_OPUS_MODEL: "glm-4.6"
      ANTHROPIC_DEFAULT_HAIKU_MODEL: "glm-4.5-air"
      API_TIMEOUT_MS: "3000000"

# Add more environments below, for example:
#   myenv:
#     target: "node server.js"
#     environment:
#       PORT: "3000"
#       NODE_ENV: "production"
"""


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def resolve_config_path() -> Path:
    """Return the path of the per-user configuration file.

    Raises
    ------
    HomeDirUnavailableError
        When the home directory cannot be determined.
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirUnavailableError(
            f"Failed to get user home directory: {exc}",
            hint="Set the HOME environment variable.",
        ) from exc
    return home / CONFIG_DIR_NAME / CONFIG_FILE_NAME


# ---------------------------------------------------------------------------
# Default file
# ---------------------------------------------------------------------------

def write_default_config(path: Path) -> None:
    """Create *path* (and its directory) holding :data:`DEFAULT_CONFIG`.

    Raises
    ------
    ConfigWriteError
        When the directory or file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(
            f"Failed to create default config at {path}: {exc}",
        ) from exc


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_KEPT_RESOLVERS: frozenset[str] = frozenset(
    {"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"},
)


class LiteralLoader(yaml.SafeLoader):
    """``SafeLoader`` that keeps plain scalars exactly as written.

    Only ``null`` / ``~`` / empty values and ``<<`` merge keys are still
    resolved implicitly, so ``18.10``, ``0755``, ``yes`` and
    ``2024-01-01`` all load as the strings the user typed.
    """


LiteralLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag in _KEPT_RESOLVERS
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _scalar_to_str(value: Any, where: str) -> str:
    """Return the string form of a YAML scalar (``""`` for null)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        raise ConfigParseError(
            f"Expected a string for {where}, got {type(value).__name__}.",
        )
    # Only reachable through an explicit tag such as ``!!int``.
    return str(value)


def _parse_environment(name: str, raw: Any) -> Environment:
    if raw is None:
        return Environment()
    if not isinstance(raw, dict):
        raise ConfigParseError(
            f"Environment '{name}' must be a mapping, got {type(raw).__name__}.",
        )

    target = _scalar_to_str(raw.get("target"), f"'{name}.target'")

    raw_vars = raw.get("environment")
    if raw_vars is None:
        raw_vars = {}
    if not isinstance(raw_vars, dict):
        raise ConfigParseError(
            f"'{name}.environment' must be a mapping, got {type(raw_vars).__name__}.",
        )
    variables = {
        _scalar_to_str(key, f"a key of '{name}.environment'"):
            _scalar_to_str(value, f"'{name}.environment.{key}'")
        for key, value in raw_vars.items()
    }
    return Environment(target=target, variables=variables)


def parse_config(data: bytes | str) -> Configuration:
    """Parse YAML *data* into a :class:`Configuration`.

    Raises
    ------
    ConfigParseError
        When *data* is not valid YAML or does not have the expected shape.
    """
    try:
        document = yaml.load(data, Loader=LiteralLoader)
    except yaml.YAMLError as exc:
        raise ConfigParseError(f"Failed to parse config file: {exc}") from exc

    if document is None:
        return Configuration()
    if not isinstance(document, dict):
        raise ConfigParseError(
            f"Config file must be a mapping, got {type(document).__name__}.",
        )

    raw_envs = document.get("environments")
    if raw_envs is None:
        return Configuration()
    if not isinstance(raw_envs, dict):
        raise ConfigParseError(
            f"'environments' must be a mapping, got {type(raw_envs).__name__}.",
        )

    environments: dict[str, Environment] = {}
    for raw_name, raw in raw_envs.items():
        name = _scalar_to_str(raw_name, "an environment name")
        environments[name] = _parse_environment(name, raw)
    return Configuration(environments=environments)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def load_config(
    path: Path,
    *,
    on_create: Callable[[Path], None] | None = None,
) -> Configuration:
    """Load the configuration at *path*, creating the default file if absent.

    Parameters
    ----------
    path:
        Location of the YAML file, usually :func:`resolve_config_path`.
    on_create:
        Optional callable invoked with *path* after the default file has
        been written.  Used by the CLI to tell the user where it went.

    Raises
    ------
    ConfigWriteError
        When the default file cannot be created.
    ConfigReadError
        When the file exists but cannot be read.
    ConfigParseError
        When the content is not a valid configuration.
    """
    if not path.exists():
        write_default_config(path)
        if on_create is not None:
            on_create(path)

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ConfigReadError(f"Failed to read config file {path}: {exc}") from exc

    return parse_config(data)
