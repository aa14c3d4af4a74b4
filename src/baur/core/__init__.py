"""Core de baur: configuración, errores, dominio, contratos y servicios.

Por qué:
- El core no conoce httpx, subprocess ni Rich: solo conceptos del problema.
"""
