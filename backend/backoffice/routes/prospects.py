"""
Back Office Backend — Prospect Route Handlers
===============================================

What:  Public contact-form intake and the lead list.
Auth:  None. The landing page posts here without a session, and the
       list/detail endpoints have always been open as well.

Route Inventory:
    POST /api/prospects         201 {success, message, data}
    GET  /api/prospects         200 {success, data, count}
    GET  /api/prospects/{id}    200 {success, data} | 404
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db_session
from backoffice.results import Ok
from backoffice.routes.responses import not_found, to_response
from backoffice.schemas.common import Envelope, ErrorResponse, ListEnvelope
from backoffice.schemas.prospect import ProspectCreate, ProspectResponse
from backoffice.services.prospect_service import prospect_service

router = APIRouter(prefix="/api/prospects", tags=["Prospects"])


@router.post(
    "",
    status_code=201,
    response_model=Envelope[ProspectResponse],
    responses={
        400: {"description": "Invalid body", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Submit a prospect",
)
async def create_prospect(body: ProspectCreate, db: AsyncSession = Depends(get_db_session)):
    result = await prospect_service.create(db, body)
    return to_response(
        result,
        schema=ProspectResponse,
        success_status=201,
        success_message="Prospect creado exitosamente",
        failure_message="Error interno del servidor al crear el prospect",
    )


@router.get(
    "",
    response_model=ListEnvelope[ProspectResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List prospects, newest first",
)
async def list_prospects(db: AsyncSession = Depends(get_db_session)):
    result = await prospect_service.list_all(db)
    return to_response(
        result,
        schema=ProspectResponse,
        failure_message="Error interno del servidor al obtener prospects",
    )


@router.get(
    "/{prospect_id}",
    response_model=Envelope[ProspectResponse],
    responses={
        404: {"description": "Prospect not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a prospect",
)
async def get_prospect(prospect_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await prospect_service.get_by_id(db, prospect_id)
    match result:
        case Ok(value=None):
            return not_found(f"Prospect con ID {prospect_id} no encontrado")
    return to_response(
        result,
        schema=ProspectResponse,
        failure_message="Error interno del servidor al obtener el prospect",
    )
