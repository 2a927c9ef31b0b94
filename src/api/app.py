"""FastAPI application configuration."""

import logging
import uuid
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.health import router as health_router
from src.api.health.models import API_VERSION
from src.api.models import INVALID_REQUEST_DETAIL, ErrorResponse
from src.api.newsletters import router as newsletters_router
from src.api.subscriptions import router as subscriptions_router
from src.observability.sentry import init_sentry
from src.utils.logging import configure_logging, request_id_var

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def assign_request_id(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line of a request with a request ID.

    Reuses the caller's X-Request-ID header when present.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    context_token = request_id_var.set(request_id)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(context_token)

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


async def handle_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Reject a malformed request with 400 instead of FastAPI's default 422."""
    locations = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    logger.warning(f"Rejected malformed request: path={request.url.path}, fields={locations}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_REQUEST_DETAIL},
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Newsletter Subscriptions API",
        version=API_VERSION,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid request"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
        },
    )

    application.middleware("http")(assign_request_id)
    application.add_exception_handler(RequestValidationError, handle_request_validation_error)

    # Register routers
    application.include_router(health_router)
    application.include_router(subscriptions_router)
    application.include_router(newsletters_router)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
