"""
Back Office Backend — Health & Diagnostics Routes
===================================================

What:  Liveness probe and a token-inspection helper for frontend developers.
Auth:  None on either route.

    GET /health               database probe with SELECT 1
    GET /api/test/jwt-roles   echoes the roles in the caller's bearer token,
                              or reports that no usable token was sent

Status levels:
    healthy:   database reachable
    unhealthy: database unreachable (still HTTP 200; monitors read `status`)
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy import text

from backoffice import __version__
from backoffice.database import engine
from backoffice.routes.responses import success_response
from backoffice.schemas.common import Envelope, HealthResponse, JwtRolesResponse
from backoffice.security import Principal, get_optional_principal

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: set once when the app loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as e:
        # Any failure here means "unreachable"; the probe must still answer
        db_status = "disconnected"
        overall = "unhealthy"
        logger.warning("Health check: database unreachable: %s", e)

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )


@router.get(
    "/api/test/jwt-roles",
    response_model=Envelope[JwtRolesResponse],
    summary="Inspect the roles carried by the bearer token",
)
async def jwt_roles(principal: Optional[Principal] = Depends(get_optional_principal)):
    if principal is None:
        return success_response(
            JwtRolesResponse(authenticated=False).model_dump(),
            message="No se proporcionó un token válido",
        )
    return success_response(
        JwtRolesResponse(
            authenticated=True,
            subject=principal.subject,
            email=principal.email,
            roles=list(principal.roles),
            system_role=principal.system_role,
        ).model_dump(),
        message="Token válido",
    )
