"""HTTP middleware."""

from filedrop.api.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = ["RequestSizeLimitMiddleware"]
