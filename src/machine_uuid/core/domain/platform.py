"""Platform utilities for machine-uuid.

This module centralizes the closed set of operating-system families the
library knows how to query. Keeping it in the domain layer lets the config,
the dispatcher and the CLI share a single source of truth.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from machine_uuid.core.errors import UnsupportedPlatformError


class Platform(str, Enum):
    """Supported operating-system families."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"

    @classmethod
    def detect(cls) -> "Platform":
        """Return the platform of the running interpreter.

        Any Unix-like host other than macOS maps to `LINUX`.
        """

        if sys.platform.startswith("win"):
            return cls.WINDOWS
        if sys.platform == "darwin":
            return cls.MACOS
        if os.name == "posix":
            return cls.LINUX
        raise UnsupportedPlatformError(sys.platform)

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return {
            Platform.WINDOWS: "Windows",
            Platform.MACOS: "macOS",
            Platform.LINUX: "Linux / Unix-like",
        }[self]
