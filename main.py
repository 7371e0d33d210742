"""
MenuCalendar FastAPI Application
Main entry point: store lifecycle, middleware, error handlers and routes
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import menus, meals, health
from domain.models import Database
from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    store_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceValidationError, NotFoundError, StoreError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("menucalendar.main")


def create_app(store: Optional[Database] = None) -> FastAPI:
    """
    Build the application around a store handle.

    When no handle is given one is created from settings. The lifespan opens
    it at startup and closes it at shutdown.
    """
    if store is None:
        store = Database(settings.database_path, echo=settings.db_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")
        store.open()
        app.state.store = store
        _logger.info(f"Server running on http://{settings.host}:{settings.port}")
        try:
            yield
        finally:
            _logger.info(f"Shutting down {settings.app_name}")
            store.close()

    application = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    # available before startup too, e.g. for dependency overrides in tests
    application.state.store = store

    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
    application.add_exception_handler(NotFoundError, not_found_exception_handler)
    application.add_exception_handler(StoreError, store_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    application.include_router(menus.router, prefix=settings.api_prefix)
    application.include_router(meals.router, prefix=settings.api_prefix)
    application.include_router(health.router, prefix=settings.api_prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
