# app/errors.py
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RepositoryUnavailable(Exception):
    """The storage backend could not complete an operation."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        message = f"Repository operation '{operation}' failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


def create_error_response(
    message: str,
    details: Optional[Any] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response


async def repository_unavailable_handler(request: Request, exc: RepositoryUnavailable):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={
            "detail": create_error_response(
                message="Storage unavailable",
                details=f"The employee store could not complete '{exc.operation}'",
                example="Please try again or contact support if the problem persists"
            )
        }
    )


async def malformed_payload_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=422,
        content={
            "detail": create_error_response(
                message="Malformed request",
                details=jsonable_encoder(exc.errors()),
                example='{"name": "Mary", "role": "Manager"}'
            )
        }
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(RepositoryUnavailable, repository_unavailable_handler)
    app.add_exception_handler(RequestValidationError, malformed_payload_handler)
