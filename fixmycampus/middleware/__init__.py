"""HTTP middleware."""

from fixmycampus.middleware.errors import unhandled_error_middleware
from fixmycampus.middleware.timing import timing_middleware

__all__ = ["timing_middleware", "unhandled_error_middleware"]
