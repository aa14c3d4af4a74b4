"""Servicios del core (orquestación sin efectos de UI)."""
