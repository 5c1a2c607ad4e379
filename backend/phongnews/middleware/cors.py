"""
Fixed single-origin CORS policy.

Headers are attached to every response regardless of the request Origin,
and any OPTIONS request is answered before routing.
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOWED_HEADERS = "Content-Type, Authorization"


class FixedOriginCORSMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, allowed_origin: str):
        super().__init__(app)
        self.headers = {
            "Access-Control-Allow-Origin": allowed_origin,
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
            "Access-Control-Allow-Credentials": "true",
        }

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
        response.headers.update(self.headers)
        return response
