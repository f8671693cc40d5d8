from core.services.invoker import Invoker, build_request, verify

__all__ = ["Invoker", "build_request", "verify"]
