"""Machine identifier dispatch.

The platform is resolved once per call (explicit argument, then the
`MACHINE_UUID_PLATFORM` setting, then detection) and mapped to exactly one
source. Only the Windows source post-processes its output; the Linux and
macOS values are returned verbatim, trailing newline included.
"""

from __future__ import annotations

import logging

from machine_uuid.adapters.sources import (
    LinuxShellSource,
    MacOSShellSource,
    WindowsShellSource,
)
from machine_uuid.core.config import AppSettings, load_settings
from machine_uuid.core.domain.models import MachineIdReport
from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.interfaces.runner import CommandRunner
from machine_uuid.core.interfaces.source import MachineIdSource

logger = logging.getLogger(__name__)

_SOURCES: dict[Platform, type[MachineIdSource]] = {
    Platform.WINDOWS: WindowsShellSource,
    Platform.MACOS: MacOSShellSource,
    Platform.LINUX: LinuxShellSource,
}


def resolve_platform(
    platform: Platform | None = None,
    settings: AppSettings | None = None,
) -> Platform:
    """Return the platform to query, detecting the host when none is forced."""

    if platform is not None:
        return platform
    if settings is not None and settings.platform is not None:
        return settings.platform
    return Platform.detect()


def build_source(
    platform: Platform,
    *,
    runner: CommandRunner | None = None,
    settings: AppSettings | None = None,
) -> MachineIdSource:
    """Instantiate the retrieval strategy for `platform`."""

    return _SOURCES[platform](runner=runner, settings=settings)


def get(
    *,
    platform: Platform | None = None,
    runner: CommandRunner | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Retrieve the machine identifier for the current (or given) platform.

    Examples (values differ per host):

        Windows -> "140EF834-2DB3-0F7A-27B4-4CEDFB73167C"
        Linux   -> "92cc698195f84d3b85f1cfb0a09e957f\\n"
        macOS   -> "F7FA2B78-F7D4-5B1B-A4E3-BACB1BBD95A1\\n"

    Raises `ProcessLaunchError`, `DecodeError`, `MalformedOutputError` or
    `UnsupportedPlatformError`.
    """

    settings = settings or load_settings()
    selected = resolve_platform(platform, settings)
    logger.debug("Retrieving machine id via %s source", selected.value)
    return build_source(selected, runner=runner, settings=settings).fetch()


def get_report(
    *,
    platform: Platform | None = None,
    runner: CommandRunner | None = None,
    settings: AppSettings | None = None,
) -> MachineIdReport:
    """Like `get`, but keep the raw output and argv alongside the value."""

    settings = settings or load_settings()
    selected = resolve_platform(platform, settings)
    source = build_source(selected, runner=runner, settings=settings)
    raw = source.fetch_raw()
    return MachineIdReport(
        platform=selected,
        machine_id=source.normalize(raw),
        raw=raw,
        command=source.argv,
    )


def get_via_windows_shell(*, runner: CommandRunner | None = None, settings: AppSettings | None = None) -> str:
    """Raw `wmic csproduct get UUID` output (header line included)."""

    return WindowsShellSource(runner=runner, settings=settings).fetch_raw()


def get_via_macos_shell(*, runner: CommandRunner | None = None, settings: AppSettings | None = None) -> str:
    """Raw IOPlatformUUID, untrimmed."""

    return MacOSShellSource(runner=runner, settings=settings).fetch_raw()


def get_via_linux_shell(*, runner: CommandRunner | None = None, settings: AppSettings | None = None) -> str:
    """Raw `/etc/machine-id` contents, untrimmed."""

    return LinuxShellSource(runner=runner, settings=settings).fetch_raw()
