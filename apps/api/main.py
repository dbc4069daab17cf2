"""FastAPI application exposing the iCalendar kind compatibility table.

The app is read-only: every endpoint answers from the process-wide table.
The property typing service is wired from configuration in create_app so
the VALUE parameter handling (lenient or strict) follows VALUE_TYPE_MODE.
"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calkinds import __version__
from calkinds.application.config import Config
from calkinds.application.services import PropertyTypingService
from calkinds.domain.errors import DomainError, IncompatibleValueKindError
from calkinds.infrastructure.bootstrap import build_property_typing_service
from calkinds.shared.logging import get_logger

from apps.api.routers.compatibility import get_property_typing_service, router as compatibility_router

logger = get_logger("apps.api")


def create_app(
    config: Optional[Config] = None,
    service: Optional[PropertyTypingService] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        config: Configuration used to build the service when none is given
        service: Pre-built property typing service (tests)

    Returns:
        Configured FastAPI application
    """
    if service is None:
        service = build_property_typing_service(config)

    app = FastAPI(
        title="calkinds API",
        description="iCalendar property/value type compatibility rules",
        version=__version__,
    )
    app.dependency_overrides[get_property_typing_service] = lambda: service
    app.include_router(compatibility_router, prefix="/properties", tags=["compatibility"])

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        """Handle domain-specific errors."""
        status_code = status.HTTP_400_BAD_REQUEST
        if isinstance(exc, IncompatibleValueKindError):
            status_code = 422

        logger.info("domain_error", code=exc.__class__.__name__, path=request.url.path)
        return JSONResponse(
            status_code=status_code,
            content={"code": exc.__class__.__name__, "message": exc.message},
        )

    @app.get("/health")
    async def health_check():
        """Liveness check reporting the table size."""
        return {"status": "ok", "properties": len(service.table)}

    return app
