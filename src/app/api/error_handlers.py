"""Global exception handlers mapping domain errors to HTTP responses.

Domain errors keep their own status code and payload. Routing errors from
the framework (unknown path, wrong method) are rendered with the same
{"message": ...} body. Anything else is handled by the server error
middleware, which never leaks internal details.
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.api.mappers import to_validation_error_response
from src.app.logging import get_logger
from src.client.schemas import MessageResponse
from src.shared.exceptions import EntityNotFound, PayloadTooLarge, ValidationFailed

logger = get_logger(__name__)

SERVER_ERROR_MESSAGE = "Server Error"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain and routing error handlers on the FastAPI app."""

    @app.exception_handler(EntityNotFound)
    async def entity_not_found_handler(request: Request, exc: EntityNotFound):
        logger.info(f"Not found on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=MessageResponse(message=f"{exc.entity_name} Not Found").model_dump(),
        )

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        logger.info(f"Validation failed on {request.method} {request.url.path}: {exc.errors}")
        return JSONResponse(
            status_code=422,
            content=to_validation_error_response(exc.errors).model_dump(),
        )

    @app.exception_handler(PayloadTooLarge)
    async def payload_too_large_handler(request: Request, exc: PayloadTooLarge):
        logger.warning(f"Rejected body on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=413,
            content=MessageResponse(message="Payload Too Large").model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=MessageResponse(message=str(exc.detail)).model_dump(),
            headers=getattr(exc, "headers", None),
        )


def server_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=MessageResponse(message=SERVER_ERROR_MESSAGE).model_dump(),
    )
