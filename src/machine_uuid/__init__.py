"""machine-uuid: retrieve the host's machine identifier.

    >>> import machine_uuid
    >>> machine_uuid.get()  # doctest: +SKIP
    '92cc698195f84d3b85f1cfb0a09e957f\\n'
"""

from __future__ import annotations

from machine_uuid.adapters.process_runner import SubprocessRunner
from machine_uuid.adapters.sources import transform_windows_output
from machine_uuid.core.config import AppSettings
from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.errors import (
    CommandTimeoutError,
    ConfigurationError,
    DecodeError,
    MachineIdError,
    MalformedOutputError,
    ProcessLaunchError,
    UnsupportedPlatformError,
)
from machine_uuid.core.interfaces.runner import CommandRunner
from machine_uuid.core.services.machine_id import (
    build_source,
    get,
    get_via_linux_shell,
    get_via_macos_shell,
    get_via_windows_shell,
)

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "CommandRunner",
    "CommandTimeoutError",
    "ConfigurationError",
    "DecodeError",
    "MachineIdError",
    "MalformedOutputError",
    "Platform",
    "ProcessLaunchError",
    "SubprocessRunner",
    "UnsupportedPlatformError",
    "build_source",
    "get",
    "get_via_linux_shell",
    "get_via_macos_shell",
    "get_via_windows_shell",
    "transform_windows_output",
]
