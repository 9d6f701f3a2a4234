"""
Back Office Backend — Unit Measure Route Handlers
===================================================

Route Inventory:
    GET    /api/unit-measures
    GET    /api/unit-measures/{id}      404 when absent
    POST   /api/unit-measures           201
    PUT    /api/unit-measures/{id}      404 when absent, nothing written
    DELETE /api/unit-measures/{id}      204 even when absent

Auth: Bearer token required on every route.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db_session
from backoffice.results import Ok
from backoffice.routes.responses import not_found, to_response
from backoffice.schemas.common import Envelope, ErrorResponse, ListEnvelope
from backoffice.schemas.unit_measure import UnitMeasureInput, UnitMeasureResponse
from backoffice.security import get_current_principal
from backoffice.services.unit_measure_service import unit_measure_service

ERRORS = {
    401: {"description": "Missing or invalid bearer token", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}
NOT_FOUND = {404: {"description": "Unit measure not found", "model": ErrorResponse}}
BAD_BODY = {400: {"description": "Invalid body", "model": ErrorResponse}}

router = APIRouter(
    prefix="/api/unit-measures",
    tags=["Unit Measures"],
    dependencies=[Depends(get_current_principal)],
)


def _missing(unit_id: int) -> str:
    return f"Unidad de medida con ID {unit_id} no encontrada"


@router.get(
    "",
    response_model=ListEnvelope[UnitMeasureResponse],
    responses=ERRORS,
    summary="List unit measures",
)
async def list_unit_measures(db: AsyncSession = Depends(get_db_session)):
    result = await unit_measure_service.list_all(db)
    return to_response(
        result,
        schema=UnitMeasureResponse,
        failure_message="Error al obtener las unidades de medida",
    )


@router.get(
    "/{unit_id}",
    response_model=Envelope[UnitMeasureResponse],
    responses={**ERRORS, **NOT_FOUND},
    summary="Get a unit measure",
)
async def get_unit_measure(unit_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await unit_measure_service.get_by_id(db, unit_id)
    match result:
        case Ok(value=None):
            return not_found(_missing(unit_id))
    return to_response(
        result,
        schema=UnitMeasureResponse,
        failure_message="Error al obtener la unidad de medida",
    )


@router.post(
    "",
    status_code=201,
    response_model=Envelope[UnitMeasureResponse],
    responses={**ERRORS, **BAD_BODY},
    summary="Create a unit measure",
)
async def create_unit_measure(body: UnitMeasureInput, db: AsyncSession = Depends(get_db_session)):
    result = await unit_measure_service.create(db, body)
    return to_response(
        result,
        schema=UnitMeasureResponse,
        success_status=201,
        success_message="Unidad de medida creada exitosamente",
        failure_message="Error al crear la unidad de medida",
    )


@router.put(
    "/{unit_id}",
    response_model=Envelope[UnitMeasureResponse],
    responses={**ERRORS, **BAD_BODY, **NOT_FOUND},
    summary="Update a unit measure",
)
async def update_unit_measure(
    unit_id: int,
    body: UnitMeasureInput,
    db: AsyncSession = Depends(get_db_session),
):
    result = await unit_measure_service.update(db, unit_id, body)
    return to_response(
        result,
        schema=UnitMeasureResponse,
        success_message="Unidad de medida actualizada exitosamente",
        not_found_message=_missing(unit_id),
        failure_message="Error al actualizar la unidad de medida",
    )


@router.delete(
    "/{unit_id}",
    status_code=204,
    responses=ERRORS,
    summary="Delete a unit measure",
)
async def delete_unit_measure(unit_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await unit_measure_service.delete(db, unit_id)
    return to_response(
        result,
        success_status=204,
        failure_message="Error al eliminar la unidad de medida",
    )
