"""
Back Office Backend — Shared Response Schemas
===============================================

What:  The response envelope every endpoint uses, plus the error and health
       response models.
Why:   Clients parse one shape everywhere: `success` says which branch they
       are on, `data` carries the payload, `message` and `count` are added
       where meaningful.

Success:
    {"success": true, "data": [...], "count": 3}
    {"success": true, "data": {...}, "message": "Prospect creado exitosamente"}

Failure:
    {
        "success": false,
        "error": "not_found",
        "message": "Tipo de egreso no encontrado",
        "details": null,
        "request_id": "a1b2c3d4"
    }

The models below document the contract in OpenAPI. Route handlers build
the actual bodies through routes/responses.py.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Successful response wrapping a single item."""
    success: bool = Field(default=True)
    data: Optional[T] = Field(default=None, description="Response payload")
    message: Optional[str] = Field(default=None, description="Human-readable outcome")


class ListEnvelope(BaseModel, Generic[T]):
    """Successful response wrapping a list, with its length in `count`."""
    success: bool = Field(default=True)
    data: List[T] = Field(default_factory=list)
    count: int = Field(description="Number of items in `data`")
    message: Optional[str] = Field(default=None)


class ErrorResponse(BaseModel):
    """
    Standardized error body for every non-2xx response.

    Fields:
        error:      Machine-readable code: validation_error, unauthorized,
                    not_found, server_error
        message:    Localized description safe to show to users
        details:    Optional context (e.g. {"fields": {...}} on validation errors)
        request_id: Correlation id for finding the matching server logs
    """
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


class JwtRolesResponse(BaseModel):
    """Diagnostic echo of the roles carried by the caller's token."""
    authenticated: bool
    subject: Optional[str] = None
    email: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    system_role: Optional[str] = None
