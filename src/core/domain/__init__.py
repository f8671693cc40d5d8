"""Modelos del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce subprocess, CLI ni sistema de archivos: solo la
  petición al verificador y su resultado.
"""

from core.domain.models import InvocationRequest, InvocationResult

__all__ = ["InvocationRequest", "InvocationResult"]
