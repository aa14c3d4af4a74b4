"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el orquestador depende de abstracciones.
"""

from baur.core.interfaces.process import ProcessRunner, ProcessStream
from baur.core.interfaces.repository import PackageRepository

__all__ = ["PackageRepository", "ProcessRunner", "ProcessStream"]
