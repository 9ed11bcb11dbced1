"""HTTP middleware applied to every request.

Registration order matters: the server error middleware must be added
before the CORS middleware so that 500 responses also carry CORS headers.
"""
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response

from src.app.api.error_handlers import server_error_response
from src.app.config import ApiSettings, CorsSettings
from src.app.logging import get_logger

logger = get_logger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


def is_under_prefix(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def register_middleware(app: FastAPI, api: ApiSettings, cors: CorsSettings) -> None:
    """Register server error recovery, CORS preflight and CORS header middleware."""

    @app.middleware("http")
    async def recover_server_errors(request: Request, call_next: CallNext) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
            return server_error_response()

    @app.middleware("http")
    async def apply_cors(request: Request, call_next: CallNext) -> Response:
        if request.method == "OPTIONS" and is_under_prefix(request.url.path, api.prefix):
            response = Response(status_code=200, media_type="application/json")
        else:
            response = await call_next(request)
        response.headers.update(cors.headers)
        return response
