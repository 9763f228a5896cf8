"""Fuente: Linux y demás sistemas tipo Unix (`/etc/machine-id`)."""

from __future__ import annotations

from machine_uuid.adapters.sources.shell import ShellSource
from machine_uuid.core.domain.platform import Platform


class LinuxShellSource(ShellSource):
    """32 caracteres hex en minúscula más salto de línea, devueltos tal cual."""

    platform = Platform.LINUX
    program = "sh"
    args = ("-c", "cat /etc/machine-id")
