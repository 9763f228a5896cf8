"""Contrato de ejecución de comandos externos.

Un `CommandRunner` lanza un programa y devuelve su stdout en bytes. Las
fuentes dependen solo de este contrato, de modo que los tests pueden
inyectar un runner falso que devuelve bytes fijos sin lanzar procesos.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Contrato mínimo para ejecutar un comando.

    Reglas de diseño:
    - Devuelve stdout crudo; no inspecciona stderr ni el código de salida.
    - Si el programa no puede lanzarse o esperarse, lanza `ProcessLaunchError`.
    """

    def run(self, program: str, args: Sequence[str]) -> bytes:
        """Ejecuta `program` con `args` y devuelve el stdout capturado."""

        ...
