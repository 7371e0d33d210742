"""
Consolidated middleware for the MenuCalendar API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceValidationError, NotFoundError, StoreError

logger = logging.getLogger("menucalendar.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def describe_validation_errors(errors) -> str:
    """Flatten pydantic error entries into one readable line"""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def error_body(message: str) -> dict:
    return {"error": message}


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        # Generate unique request ID
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and wrongly typed fields are plain client errors here"""
    logger.warning(f"Validation error on {request.url}: {exc.errors()}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(
            f"Request validation failed: {describe_validation_errors(exc.errors())}"
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
    )


async def service_validation_exception_handler(
    request: Request, exc: ServiceValidationError
):
    """Handle service validation errors"""
    logger.warning(f"Service validation error on {request.url}: {exc.code} {str(exc)}")

    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def not_found_exception_handler(request: Request, exc: NotFoundError):
    """Handle not found errors"""
    logger.warning(f"Resource not found on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def store_exception_handler(request: Request, exc: StoreError):
    """The database engine rejected a statement"""
    logger.exception(f"Store failure on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("An unexpected error occurred"),
    )
