"""Contrato de una fuente de identificador por sistema operativo."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from machine_uuid.core.domain.platform import Platform


@runtime_checkable
class MachineIdSource(Protocol):
    """Una estrategia de obtención ligada a una plataforma.

    - `fetch_raw` devuelve la salida decodificada del comando, sin tocar.
    - `normalize` reduce esa salida al identificador limpio.
    - `fetch` devuelve el identificador final para esa plataforma.
    """

    platform: Platform

    @property
    def argv(self) -> list[str]:
        ...

    def fetch_raw(self) -> str:
        ...

    def normalize(self, raw: str) -> str:
        ...

    def fetch(self) -> str:
        ...
