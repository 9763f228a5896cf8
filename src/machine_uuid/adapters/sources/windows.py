"""Fuente: Windows (`wmic csproduct get UUID`).

Salida cruda típica:

    UUID
    140EF834-2DB3-0F7A-27B4-4CEDFB73167C

La cabecera se elimina con `transform_windows_output`.
"""

from __future__ import annotations

from machine_uuid.adapters.sources.shell import ShellSource
from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.errors import MalformedOutputError


def transform_windows_output(output: str) -> str:
    """Quita la cabecera `UUID` y devuelve solo el identificador.

    Parte la entrada en el primer espacio y recorta la segunda parte. Sin
    espacio lanza `MalformedOutputError`.

    A diferencia de un split-and-trim simple, una cabecera sin valor (solo
    `UUID` seguido de espacios y saltos de línea) no devuelve `""`: también
    lanza `MalformedOutputError`.
    """

    _header, sep, rest = output.partition(" ")
    if not sep:
        raise MalformedOutputError(output)

    value = rest.strip()
    if not value:
        raise MalformedOutputError(output)
    return value


class WindowsShellSource(ShellSource):
    platform = Platform.WINDOWS
    program = "cmd"
    args = ("/C", "wmic csproduct get UUID")

    def normalize(self, raw: str) -> str:
        return transform_windows_output(raw)

    def fetch(self) -> str:
        return self.normalize(self.fetch_raw())
