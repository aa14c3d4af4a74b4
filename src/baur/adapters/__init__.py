"""Adaptadores de I/O: AUR por HTTP y ejecución de procesos externos."""
