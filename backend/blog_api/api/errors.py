"""
Exception types and handlers that shape the API's error responses.

Field problems (whether caught by ``blog_api.validation`` or by FastAPI
while parsing the request) become a 400 listing every violation.
Database failures become a generic 500 after being logged.
"""

import logging
from typing import List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ..schemas.post import FieldViolation

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Validation failed"
INTERNAL_ERROR = "Internal server error"


class PostValidationError(Exception):
    def __init__(self, violations: List[FieldViolation]) -> None:
        super().__init__(VALIDATION_FAILED)
        self.violations = violations


def _field_name(loc: Sequence) -> str:
    # ("body", "title") -> "title"; ("body",) for a missing body -> "body"
    return str(loc[-1]) if loc else "request"


def _violations_response(violations: List[FieldViolation]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": VALIDATION_FAILED,
            "errors": [violation.model_dump() for violation in violations],
        },
    )


async def post_validation_error_handler(request: Request, exc: PostValidationError) -> JSONResponse:
    return _violations_response(exc.violations)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    violations = [
        FieldViolation(field=_field_name(error.get("loc", ())), message=error.get("msg", "Invalid value"))
        for error in exc.errors()
    ]
    logger.warning("Rejected malformed request to %s %s", request.method, request.url.path)
    return _violations_response(violations)


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database failure while handling %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostValidationError, post_validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
