"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El Invoker depende del contrato, no de `asyncio.subprocess`.
"""

from core.interfaces.process_runner import ProcessRunner

__all__ = ["ProcessRunner"]
