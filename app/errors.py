"""
Domain errors and the app-wide exception handlers.

Response shapes:
- validation failure -> 422 `{"detail": ..., "errors": {field: [messages]}}`
- malformed request (bad JSON, non-integer path id) -> 400, same shape
- anything unexpected -> 500 `{"detail": "Internal server error"}`
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "The given data was invalid."
MALFORMED_REQUEST = "Malformed request."


class EmployeeNotFoundError(LookupError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    malformed = is_malformed(errors)

    logger.warning(
        "Rejected request path=%s method=%s malformed=%s errors=%s",
        request.url.path,
        request.method,
        malformed,
        len(errors),
    )

    if malformed:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": MALFORMED_REQUEST, "errors": group_errors(errors)},
        )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": VALIDATION_FAILED, "errors": group_errors(errors)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback when the exception is re-raised after this response.
    logger.error(
        "Unhandled exception path=%s method=%s error=%s", request.url.path, request.method, type(exc).__name__
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def is_malformed(errors: Iterable[Mapping[str, Any]]) -> bool:
    """
    True when the request could not even be read, as opposed to read but invalid.

    FastAPI reports both through RequestValidationError; an undecodable JSON
    body shows up as `json_invalid` and a bad `{id}` as a `path` location.
    """

    for err in errors:
        loc = tuple(err.get("loc", ()))
        if err.get("type") == "json_invalid":
            return True
        if loc and loc[0] == "path":
            return True
    return False


def group_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    grouped: dict[str, list[str]] = defaultdict(list)
    for err in errors:
        grouped[_field_name(err)].append(err.get("msg", "Invalid value"))
    return dict(grouped)


def _field_name(err: Mapping[str, Any]) -> str:
    loc = tuple(err.get("loc", ()))
    if err.get("type") == "json_invalid":
        return "body"
    # ("body", "firstname") -> "firstname"; ("path", "id") -> "id"
    if len(loc) > 1 and loc[0] in ("body", "path", "query"):
        loc = loc[1:]
    return ".".join(str(part) for part in loc) or "body"
