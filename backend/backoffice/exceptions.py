"""
Back Office Backend — Custom Exception Hierarchy
==================================================

What:  Application-specific exceptions for errors that cannot be expressed
       as a service outcome (see results.py).
Why:   Authentication happens in a dependency, before any service runs, so
       the only way to stop the request is to raise.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the unified error envelope.

Exception Hierarchy:
    BackOfficeError (base)       → 500 Internal Server Error
    └── AuthenticationError      → 401 Unauthorized
"""

from typing import Any, Dict, Optional


class BackOfficeError(Exception):
    """
    Base exception for all back office application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "Error interno del servidor",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class AuthenticationError(BackOfficeError):
    """
    Raised when the bearer token is missing, malformed, badly signed or expired.

    HTTP: 401 Unauthorized with `WWW-Authenticate: Bearer`.
    The reason goes to `context` for the server log; the client only sees
    the generic message.
    """

    status_code = 401
    error_code = "unauthorized"

    def __init__(self, reason: str = "missing_token"):
        super().__init__(
            message="No autorizado",
            context={"reason": reason},
        )
        self.reason = reason
