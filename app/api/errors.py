"""Map credential-logic errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.errors import AuthError, Unauthorized

logger = logging.getLogger(__name__)


def auth_error_response(exc: AuthError) -> JSONResponse:
    """Body is {"detail": message, "code": code}; 401s carry WWW-Authenticate."""
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError) -> JSONResponse:
        if not isinstance(exc, Unauthorized):
            logger.info(
                "Auth request rejected",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": exc.status_code,
                    "error_code": exc.code,
                },
            )
        return auth_error_response(exc)
