"""Wrapper de subprocess.

Estandariza cómo se lanzan los comandos del sistema (captura de stdout,
timeout opcional, logging) y cómo se decodifica su salida.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from machine_uuid.core.config import AppSettings, load_settings
from machine_uuid.core.errors import CommandTimeoutError, DecodeError, ProcessLaunchError
from machine_uuid.core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Ejecuta comandos reales con `subprocess.run`.

    - stdout se devuelve completo aunque el proceso termine con código != 0.
    - stderr se descarta.
    - Sin timeout (`None`) un comando colgado bloquea al llamador.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def run(self, program: str, args: Sequence[str]) -> bytes:
        argv = [program, *args]
        logger.debug("Launching %s", argv)
        try:
            completed = subprocess.run(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            logger.warning("%s did not finish within %ss", program, self._timeout)
            raise CommandTimeoutError(program, self._timeout or 0.0, exc) from exc
        except OSError as exc:
            logger.warning("Could not launch %s: %s", program, exc)
            raise ProcessLaunchError(program, exc) from exc

        if completed.returncode != 0:
            logger.debug("%s exited with status %d", program, completed.returncode)
        return completed.stdout


def build_runner(settings: AppSettings | None = None) -> SubprocessRunner:
    """Crea el runner por defecto a partir de la configuración."""

    settings = settings or load_settings()
    return SubprocessRunner(timeout=settings.command_timeout_seconds)


def decode_output(raw: bytes) -> str:
    """Decodifica stdout como UTF-8 estricto, conservando saltos de línea."""

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(exc.start, exc.reason) from exc
