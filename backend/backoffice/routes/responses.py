"""
Back Office Backend — Response Envelope Helpers
=================================================

What:  Builds every JSON body the API returns and maps service outcomes to
       HTTP status codes.
Why:   One place decides the envelope shape, so endpoints stay thin and
       cannot drift apart.

Outcome mapping:
    Ok          → success_status (200 / 201), or 204 with no body
    NotFound    → 404 not_found
    Invalid     → 400 validation_error, details.fields lists the violations
    Unexpected  → 500 server_error with the endpoint's generic message;
                  the detail only reaches the server log
"""

import logging
from typing import Any, Dict, Optional, Type

from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.responses import Response

from backoffice.middleware.request_id import request_id_var
from backoffice.results import Invalid, NotFound, Ok, Result, Unexpected

logger = logging.getLogger(__name__)


def _serialize(value: Any, schema: Optional[Type[BaseModel]]) -> Any:
    if schema is None or value is None:
        return value
    return schema.model_validate(value).model_dump(mode="json")


def success_response(
    data: Any = None,
    *,
    schema: Optional[Type[BaseModel]] = None,
    status_code: int = 200,
    message: Optional[str] = None,
) -> JSONResponse:
    """Success envelope. Lists get a `count`; `message` is added when given."""
    body: Dict[str, Any] = {"success": True}
    if isinstance(data, (list, tuple)):
        body["data"] = [_serialize(item, schema) for item in data]
        body["count"] = len(data)
    else:
        body["data"] = _serialize(data, schema)
    if message is not None:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def error_response(
    status_code: int,
    error: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Failure envelope. Never put exception text in `message` or `details`."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "message": message,
            "details": details,
            "request_id": request_id if request_id is not None else request_id_var.get(""),
        },
        headers=headers,
    )


def not_found(message: str) -> JSONResponse:
    return error_response(404, "not_found", message)


def to_response(
    result: Result,
    *,
    failure_message: str,
    not_found_message: str = "Recurso no encontrado",
    schema: Optional[Type[BaseModel]] = None,
    success_status: int = 200,
    success_message: Optional[str] = None,
) -> Response:
    """Map a service outcome to the HTTP response the client sees."""
    match result:
        case Ok(value=value):
            if success_status == 204:
                return Response(status_code=204)
            return success_response(
                value,
                schema=schema,
                status_code=success_status,
                message=success_message,
            )
        case NotFound(resource=resource, resource_id=resource_id):
            logger.info("%s %s not found", resource, resource_id)
            return not_found(not_found_message)
        case Invalid(message=message, fields=fields):
            return error_response(400, "validation_error", message, {"fields": fields})
        case Unexpected(operation=operation):
            # The service already logged the exception with its traceback
            logger.error("Responding 500 after failed %s", operation)
            return error_response(500, "server_error", failure_message)
        case _:
            raise TypeError(f"Unsupported service result: {result!r}")
