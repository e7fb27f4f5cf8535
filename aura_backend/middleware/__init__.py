from .error_handling import ErrorHandlingMiddleware, request_validation_handler
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
    "request_validation_handler",
]
