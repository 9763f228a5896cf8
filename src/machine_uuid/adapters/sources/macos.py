"""Fuente: macOS (`ioreg`, clave IOPlatformUUID).

Devuelve el UUID seguido de un salto de línea, sin recortar.
"""

from __future__ import annotations

from machine_uuid.adapters.sources.shell import ShellSource
from machine_uuid.core.domain.platform import Platform


class MacOSShellSource(ShellSource):
    platform = Platform.MACOS
    program = "sh"
    args = (
        "-c",
        r"""ioreg -d2 -c IOPlatformExpertDevice | awk -F\" '/IOPlatformUUID/{print $(NF-1)}'""",
    )
