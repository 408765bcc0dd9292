"""
Custom exception handlers and error types
"""

from fastapi import Request
from fastapi.responses import JSONResponse
import logging
import traceback
from typing import Optional

logger = logging.getLogger(__name__)


class ImageResolutionError(Exception):
    """Base exception for keyword-to-image resolution errors"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class NotFoundError(ImageResolutionError):
    """Raised when a keyword is absent from the keyword table.

    Internal only: the resolver treats it as a miss and never lets it reach
    the client.
    """

    def __init__(self, keyword: str):
        super().__init__(f"Keyword not in local table: {keyword!r}", "NOT_FOUND")
        self.keyword = keyword


class NetworkError(ImageResolutionError):
    """Raised when the upstream photo API cannot be reached"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, "NETWORK_ERROR")
        self.url = url


class UpstreamResponseError(ImageResolutionError):
    """Raised when the upstream photo API answers with an error status or
    a body that lacks the expected image URL.

    Example:
        raise UpstreamResponseError("Unexpected status", status_code=403)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, "UPSTREAM_RESPONSE_ERROR")
        self.status_code = status_code


class ConfigurationError(ImageResolutionError):
    """Exception raised when configuration is invalid"""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key


async def image_resolution_exception_handler(
    request: Request, exc: ImageResolutionError
):
    """Handle resolution errors that escaped the use case.

    Upstream failures map to 502; anything else is a server fault.
    """
    if isinstance(exc, (NetworkError, UpstreamResponseError)):
        status_code = 502
        error = "Upstream image provider failed"
    else:
        status_code = 500
        error = "Image resolution failed"

    logger.error("Image resolution error on %s: %s", request.url.path, exc.message)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": {
                "error": error,
                "details": exc.message,
                "error_code": exc.error_code,
            }
        },
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.error(f"Unexpected error: {type(exc).__name__}: {str(exc)}")
    logger.error(f"Traceback: {traceback.format_exc()}")

    return JSONResponse(
        status_code=500,
        content={
            "detail": {
                "error": "Internal server error",
                "details": "An unexpected error occurred",
            }
        },
    )
