"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2 y dataclasses).
- El dominio no conoce HTTP, CLI ni procesos: solo conceptos del problema.
"""
