"""Jerarquía de errores de la librería.

Reglas:
- Todo error recuperable hereda de `MachineIdError`, así el llamador puede
  capturar uno solo.
- Ningún error se traga: se propaga con `raise ... from exc` hasta el
  llamador (la CLI es la única capa que los convierte en salida).
"""

from __future__ import annotations


class MachineIdError(Exception):
    """Base de todos los errores al obtener el identificador de máquina."""


class ProcessLaunchError(MachineIdError):
    """El comando externo no pudo lanzarse o no se pudo esperar su salida."""

    def __init__(self, program: str, cause: BaseException) -> None:
        self.program = program
        self.cause = cause
        super().__init__(f"Failed to execute process: {cause}")


class CommandTimeoutError(ProcessLaunchError):
    """El comando externo superó el timeout configurado y fue terminado."""

    def __init__(self, program: str, timeout: float, cause: BaseException) -> None:
        self.timeout = timeout
        super().__init__(program, cause)


class DecodeError(MachineIdError):
    """La salida capturada no es UTF-8 válido."""

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Failed to retrieve UUID from shell: {reason} at byte {position}")


class MalformedOutputError(MachineIdError):
    """La salida de Windows no trae cabecera y valor separados por espacio."""

    def __init__(self, output: str) -> None:
        self.output = output
        super().__init__(f"Malformed Windows UUID output: {output!r}")


class UnsupportedPlatformError(MachineIdError):
    """El sistema anfitrión no es Windows, macOS ni tipo Unix."""

    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(f"Unsupported platform: {system!r}")


class ConfigurationError(MachineIdError):
    """Una variable `MACHINE_UUID_*` (o su `.env`) tiene un valor inválido."""
