"""Core del wrapper: configuración, dominio, errores y el Invoker."""
