"""
Domain Exception Handler.

Translates the business errors raised by services into JSON responses
carrying the status code declared on the error class.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from unguka.core.errors import UngukaError
from unguka.core.logging_config import get_logger

logger = get_logger(__name__)


async def domain_exception_handler(request: Request, exc: UngukaError) -> JSONResponse:
    """
    Answer a business failure with its status code and message.

    Args:
        request: The HTTP request that caused the exception
        exc: The domain error that was raised

    Returns:
        JSONResponse with ``detail`` and ``error_type``
    """
    logger.warning(
        f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "error_type": type(exc).__name__,
        },
    )
