"""
PhongNews Backend - FastAPI Application

User registration with admin approval plus shared resort data
(rooms, guests, bookings, invoices, settings) kept in a key-value store.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

from phongnews import __version__
from phongnews.config import Settings, get_settings
from phongnews.core.errors import AppError, InternalError, MailError, StoreError, ValidationError
from phongnews.database.connections import close_store
from phongnews.logging_setup import configure_logging
from phongnews.middleware import FixedOriginCORSMiddleware, RequestLoggingMiddleware
from phongnews.routers import auth, data, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    The store connects lazily on first use; shutdown closes it.
    """
    logger.info("Starting up PhongNews Backend...")
    yield
    logger.info("Shutting down PhongNews Backend...")
    await close_store()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def backend_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    error = InternalError(detail=str(exc))
    return JSONResponse(status_code=error.status_code, content=error.to_body())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError()
    return JSONResponse(status_code=error.status_code, content=error.to_body())


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="PhongNews API",
        description="""
## PhongNews Backend

- **Auth**: registration drafts approved by an admin link, login with a signed token,
  temporary password reset by e-mail
- **Data**: list/create/update/delete over `rooms`, `guests`, `bookings`,
  `invoices` and `settings`

Data routes are open: there is no per-user authorization.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StoreError, backend_error_handler)
    app.add_exception_handler(MailError, backend_error_handler)
    # Stored documents that no longer fit the user model
    app.add_exception_handler(SchemaValidationError, backend_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Last added runs first: CORS answers preflights before they are logged
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(FixedOriginCORSMiddleware, allowed_origin=settings.allowed_origin)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(data.router)

    return app


app = create_app()


def run() -> None:
    """
    Serve the app locally with uvicorn.

    On a managed host (VERCEL set) the platform imports ``app`` instead.
    """
    import uvicorn

    settings = get_settings()
    if settings.vercel:
        logger.warning("VERCEL is set: the host serves phongnews.main:app, not starting a listener")
        return

    logger.info("Running local at http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
