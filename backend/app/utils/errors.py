from typing import Any, Dict, Optional

from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


def error_response(
    message: str,
    field_errors: Optional[Dict[str, str]] = None,
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    field_errors = field_errors or {}
    if code >= 500:
        logger.error("%s %s", message, field_errors)
    else:
        logger.warning("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)


class ApiError(HTTPException):
    """HTTP error rendered as ``{"error": message}``.

    The settings screens and admin tables read ``error`` from failed
    responses, so their routers raise this instead of ``error_response``.
    """

    def __init__(self, message: str, code: int = status.HTTP_400_BAD_REQUEST, details: Any = None) -> None:
        super().__init__(status_code=code, detail=message)
        self.message = message
        self.details = details

    def body(self) -> dict:
        if self.details is None:
            return {"error": self.message}
        return {"error": self.message, "details": self.details}


def api_error(message: str, code: int = status.HTTP_400_BAD_REQUEST, details: Any = None) -> ApiError:
    if code >= 500:
        logger.error("%s (status=%s)", message, code)
    else:
        logger.info("%s (status=%s)", message, code)
    return ApiError(message, code, details)
