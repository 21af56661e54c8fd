"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from postgrest.exceptions import APIError

from exercise_tracker.api.landing import LANDING_PAGE_HTML
from exercise_tracker.api.users import router as users_router
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_allowed_origins
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.errors import ErrorKind, ExerciseTrackerError

ERROR_STATUS: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.CONFLICT: HTTPStatus.BAD_REQUEST,
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Exercise Tracker", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(users_router)

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(
        request: Request, exc: ExerciseTrackerError
    ) -> JSONResponse:
        status = ERROR_STATUS.get(exc.kind, HTTPStatus.INTERNAL_SERVER_ERROR)
        logger.info(
            "Request rejected",
            extra={"path": request.url.path, "kind": exc.kind.value},
        )
        return JSONResponse(status_code=status, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=ERROR_STATUS[ErrorKind.VALIDATION],
            content={"detail": _format_validation_errors(exc)},
        )

    # Store failures are answered inside the CORS middleware so browsers can
    # read the error; the catch-all below runs outside it.
    async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Store operation failed", extra={"path": request.url.path})
        return _internal_error()

    app.add_exception_handler(APIError, store_error_handler)
    app.add_exception_handler(RuntimeError, store_error_handler)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return _internal_error()

    @app.get("/", response_class=HTMLResponse)
    async def landing_page() -> HTMLResponse:
        """Static landing page with forms for the API."""
        return HTMLResponse(LANDING_PAGE_HTML)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _internal_error() -> JSONResponse:
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into a single readable message."""
    messages = []
    for error in exc.errors():
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "invalid request"
