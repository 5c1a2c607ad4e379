from phongnews.middleware.cors import FixedOriginCORSMiddleware
from phongnews.middleware.request_logging import RequestLoggingMiddleware

__all__ = ["FixedOriginCORSMiddleware", "RequestLoggingMiddleware"]
