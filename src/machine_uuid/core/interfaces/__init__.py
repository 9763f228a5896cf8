"""Interfaces/abstracciones del Core.

Define contratos (Protocol) que implementan los adaptadores concretos
(ejecución de procesos, fuentes por sistema operativo).
"""
