"""cs-switcher — launch a command under a named set of environment overrides.

Environments are read from ``~/.cs/config.yaml`` and selected by name on
the command line.
"""

from cs_switcher.version import __version__

__all__: list[str] = ["__version__"]
