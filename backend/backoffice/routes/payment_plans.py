"""
Back Office Backend — Payment Plan Route Handlers
===================================================

Route Inventory:
    POST   /api/payment-plans
    GET    /api/payment-plans/{id}
    GET    /api/payment-plans/fixed-expense/{fixed_expense_id}
    GET    /api/payment-plans/expense/{expense_id}
    DELETE /api/payment-plans/{id}          204 even when the plan did not exist

Auth: Bearer token required on every route.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db_session
from backoffice.routes.responses import to_response
from backoffice.schemas.common import Envelope, ErrorResponse, ListEnvelope
from backoffice.schemas.payment_plan import PaymentPlanCreate, PaymentPlanResponse
from backoffice.security import get_current_principal
from backoffice.services.payment_plan_service import payment_plan_service

ERRORS = {
    401: {"description": "Missing or invalid bearer token", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}

router = APIRouter(
    prefix="/api/payment-plans",
    tags=["Payment Plans"],
    dependencies=[Depends(get_current_principal)],
)


@router.post(
    "",
    status_code=201,
    response_model=Envelope[PaymentPlanResponse],
    responses={
        **ERRORS,
        400: {"description": "Zero or two owners, or invalid fields", "model": ErrorResponse},
    },
    summary="Create a payment plan",
    description="Exactly one of `expenseId` / `fixedExpenseId` must be given.",
)
async def create_payment_plan(
    body: PaymentPlanCreate,
    db: AsyncSession = Depends(get_db_session),
):
    result = await payment_plan_service.create(db, body)
    return to_response(
        result,
        schema=PaymentPlanResponse,
        success_status=201,
        success_message="Plan de pago creado exitosamente",
        failure_message="Error al crear el plan de pago",
    )


# Registered before "/{plan_id}" so the literal segments are matched first
@router.get(
    "/fixed-expense/{fixed_expense_id}",
    response_model=ListEnvelope[PaymentPlanResponse],
    responses=ERRORS,
    summary="List the payment plans of a fixed expense",
)
async def list_by_fixed_expense(
    fixed_expense_id: int,
    db: AsyncSession = Depends(get_db_session),
):
    result = await payment_plan_service.list_by_fixed_expense(db, fixed_expense_id)
    return to_response(
        result,
        schema=PaymentPlanResponse,
        failure_message="Error al obtener los planes de pago",
    )


@router.get(
    "/expense/{expense_id}",
    response_model=ListEnvelope[PaymentPlanResponse],
    responses=ERRORS,
    summary="List the payment plans of an expense",
)
async def list_by_expense(expense_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await payment_plan_service.list_by_expense(db, expense_id)
    return to_response(
        result,
        schema=PaymentPlanResponse,
        failure_message="Error al obtener los planes de pago",
    )


@router.get(
    "/{plan_id}",
    response_model=Envelope[PaymentPlanResponse],
    responses={**ERRORS, 404: {"description": "Plan not found", "model": ErrorResponse}},
    summary="Get a payment plan",
)
async def get_payment_plan(plan_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await payment_plan_service.get_by_id(db, plan_id)
    return to_response(
        result,
        schema=PaymentPlanResponse,
        not_found_message=f"Plan de pago con ID {plan_id} no encontrado",
        failure_message="Error al obtener el plan de pago",
    )


@router.delete(
    "/{plan_id}",
    status_code=204,
    responses=ERRORS,
    summary="Delete a payment plan",
)
async def delete_payment_plan(plan_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await payment_plan_service.delete(db, plan_id)
    return to_response(
        result,
        success_status=204,
        failure_message="Error al eliminar el plan de pago",
    )
