"""Base común de las fuentes que consultan una shell del sistema."""

from __future__ import annotations

from machine_uuid.adapters.process_runner import build_runner, decode_output
from machine_uuid.core.config import AppSettings
from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.interfaces.runner import CommandRunner
from machine_uuid.core.interfaces.source import MachineIdSource


class ShellSource(MachineIdSource):
    """Ejecuta una línea de comando fija y devuelve su stdout decodificado.

    Las subclases solo declaran `platform`, `program` y `args`.
    """

    platform: Platform
    program: str
    args: tuple[str, ...]

    def __init__(
        self,
        runner: CommandRunner | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._runner = runner or build_runner(settings)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def fetch_raw(self) -> str:
        raw = self._runner.run(self.program, self.args)
        return decode_output(raw)

    def normalize(self, raw: str) -> str:
        return raw.strip()

    def fetch(self) -> str:
        return self.fetch_raw()
