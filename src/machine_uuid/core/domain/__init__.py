"""Modelos y entidades del dominio.

El dominio no conoce subprocess ni la CLI: solo conceptos del problema
(plataforma, resultado de la consulta).
"""
