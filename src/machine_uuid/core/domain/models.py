"""Modelos del dominio (Pydantic v2).

Nota:
- El identificador en sí es un `str` plano; este modelo solo describe el
  resultado completo que la CLI serializa con `--json`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from machine_uuid.core.domain.platform import Platform


class MachineIdReport(BaseModel):
    """Resultado de una consulta: valor normalizado más la evidencia cruda."""

    platform: Platform = Field(
        ...,
        description="Familia de sistema operativo usada para la consulta.",
    )
    machine_id: str = Field(
        ...,
        description="Identificador final, sin espacios al inicio ni al final.",
    )
    raw: str = Field(
        ...,
        description="Salida decodificada del comando, tal cual la devolvió el sistema.",
    )
    command: list[str] = Field(
        default_factory=list,
        description="argv ejecutado (programa + argumentos).",
    )
