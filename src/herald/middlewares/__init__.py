from .access import AccessLogMiddleware

__all__ = ["AccessLogMiddleware"]
