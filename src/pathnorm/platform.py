"""Platform collaborators consulted by the path normalizer.

The normalizer never touches ``os`` directly. It asks a platform object for
the current directory and the native separator, so resolution is
deterministic under test and independent of the host it runs on.
"""

import logging
import os
from pathlib import Path
from typing import Protocol

from pathnorm.config import PathnormConfig

logger = logging.getLogger(__name__)

VALID_SEPARATORS = ("/", "\\")


class Platform(Protocol):
    """What the normalizer needs to know about its host."""

    def current_directory(self) -> str:
        """Return the current working directory with ``/`` separators."""
        ...

    def native_separator(self) -> str:
        """Return the separator used when no explicit one is requested."""
        ...


class HostPlatform:
    """Platform backed by the running process.

    The native separator is a runtime value: it defaults to ``os.sep`` but
    can be overridden, e.g. to generate Windows project files on Linux.
    """

    def __init__(self, separator: str | None = None):
        if separator is None:
            separator = os.sep
        if separator not in VALID_SEPARATORS:
            raise ValueError(f"separator must be one of {VALID_SEPARATORS}, got: {separator!r}")
        self._separator = separator

    def current_directory(self) -> str:
        return str(Path.cwd()).replace("\\", "/")

    def native_separator(self) -> str:
        return self._separator

    def __repr__(self) -> str:
        return f"HostPlatform(separator={self._separator!r})"


class FixedPlatform:
    """Platform with a pinned working directory and separator."""

    def __init__(self, cwd: str, separator: str = "/"):
        if not cwd:
            raise ValueError("cwd must be a non-empty path")
        if separator not in VALID_SEPARATORS:
            raise ValueError(f"separator must be one of {VALID_SEPARATORS}, got: {separator!r}")
        self._cwd = cwd.replace("\\", "/")
        self._separator = separator

    def current_directory(self) -> str:
        return self._cwd

    def native_separator(self) -> str:
        return self._separator

    def __repr__(self) -> str:
        return f"FixedPlatform(cwd={self._cwd!r}, separator={self._separator!r})"


def platform_from_config(config: PathnormConfig) -> Platform:
    """Build the platform described by a configuration.

    Args:
        config: Loaded pathnorm configuration

    Returns:
        FixedPlatform when the config pins a working directory,
        HostPlatform otherwise
    """
    separator = config.platform.separator
    if config.platform.cwd:
        platform = FixedPlatform(config.platform.cwd, separator or os.sep)
    else:
        platform = HostPlatform(separator)

    logger.debug(f"Using platform {platform!r}")
    return platform
