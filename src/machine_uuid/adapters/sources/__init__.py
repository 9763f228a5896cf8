"""Fuentes de identificador (una por sistema operativo).

Cada módulo implementa `core.interfaces.source.MachineIdSource`.
"""

from machine_uuid.adapters.sources.linux import LinuxShellSource
from machine_uuid.adapters.sources.macos import MacOSShellSource
from machine_uuid.adapters.sources.shell import ShellSource
from machine_uuid.adapters.sources.windows import WindowsShellSource, transform_windows_output

__all__ = [
	"LinuxShellSource",
	"MacOSShellSource",
	"ShellSource",
	"WindowsShellSource",
	"transform_windows_output",
]
