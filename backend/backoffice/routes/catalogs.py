"""
Back Office Backend — Catalog Route Handlers
==============================================

What:  Read endpoints for every dropdown catalog, plus creating bank entities.
Who:   Expense and payment forms in the back office frontend.
Auth:  Bearer token required on every route (router-level dependency).

Route Inventory:
    GET  /api/bank-entities
    POST /api/bank-entities
    GET  /api/payment-methods
    GET  /api/payment-types
    GET  /api/receipt-types
    GET  /api/expense-categories
    GET  /api/expense-subcategories?categoryId=
    GET  /api/expense-types
    GET  /api/expense-types/{id}
    GET  /api/recurrence-types
    GET  /api/recurrence-types/{id}
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.database import get_db_session
from backoffice.routes.responses import to_response
from backoffice.schemas.catalog import (
    BankEntityCreate,
    BankEntityResponse,
    ExpenseCategoryResponse,
    ExpenseSubcategoryResponse,
    ExpenseTypeResponse,
    PaymentMethodResponse,
    PaymentTypeResponse,
    ReceiptTypeResponse,
    RecurrenceTypeResponse,
)
from backoffice.schemas.common import Envelope, ErrorResponse, ListEnvelope
from backoffice.security import get_current_principal
from backoffice.services.catalog_service import CatalogKind, catalog_service

ERRORS = {
    401: {"description": "Missing or invalid bearer token", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}
ERRORS_WITH_404 = {
    **ERRORS,
    404: {"description": "Not found or inactive", "model": ErrorResponse},
}

router = APIRouter(
    prefix="/api",
    tags=["Catalogs"],
    dependencies=[Depends(get_current_principal)],
)


# ── Bank Entities ─────────────────────────────────────────────────────────

@router.get(
    "/bank-entities",
    response_model=ListEnvelope[BankEntityResponse],
    responses=ERRORS,
    summary="List bank entities",
)
async def list_bank_entities(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.BANK_ENTITY)
    return to_response(
        result,
        schema=BankEntityResponse,
        failure_message="Error al obtener las entidades bancarias",
    )


@router.post(
    "/bank-entities",
    status_code=201,
    response_model=Envelope[BankEntityResponse],
    responses={**ERRORS, 400: {"description": "Invalid body", "model": ErrorResponse}},
    summary="Create a bank entity",
)
async def create_bank_entity(
    body: BankEntityCreate,
    db: AsyncSession = Depends(get_db_session),
):
    result = await catalog_service.create(db, CatalogKind.BANK_ENTITY, body.model_dump())
    return to_response(
        result,
        schema=BankEntityResponse,
        success_status=201,
        success_message="Entidad bancaria creada exitosamente",
        failure_message="Error al crear la entidad bancaria",
    )


# ── Payment Catalogs ──────────────────────────────────────────────────────

@router.get(
    "/payment-methods",
    response_model=ListEnvelope[PaymentMethodResponse],
    responses=ERRORS,
    summary="List payment methods",
)
async def list_payment_methods(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.PAYMENT_METHOD)
    return to_response(
        result,
        schema=PaymentMethodResponse,
        failure_message="Error al obtener los métodos de pago",
    )


@router.get(
    "/payment-types",
    response_model=ListEnvelope[PaymentTypeResponse],
    responses=ERRORS,
    summary="List payment types",
)
async def list_payment_types(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.PAYMENT_TYPE)
    return to_response(
        result,
        schema=PaymentTypeResponse,
        failure_message="Error al obtener los tipos de pago",
    )


@router.get(
    "/receipt-types",
    response_model=ListEnvelope[ReceiptTypeResponse],
    responses=ERRORS,
    summary="List receipt (document) types",
)
async def list_receipt_types(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.RECEIPT_TYPE)
    return to_response(
        result,
        schema=ReceiptTypeResponse,
        failure_message="Error al obtener los tipos de documento",
    )


# ── Expense Catalogs ──────────────────────────────────────────────────────

@router.get(
    "/expense-categories",
    response_model=ListEnvelope[ExpenseCategoryResponse],
    responses=ERRORS,
    summary="List expense categories",
)
async def list_expense_categories(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.EXPENSE_CATEGORY)
    return to_response(
        result,
        schema=ExpenseCategoryResponse,
        failure_message="Error al obtener las categorías de gastos",
    )


@router.get(
    "/expense-subcategories",
    response_model=ListEnvelope[ExpenseSubcategoryResponse],
    responses=ERRORS,
    summary="List expense subcategories",
    description="All subcategories, or only those of `categoryId`. An unknown category yields an empty list.",
)
async def list_expense_subcategories(
    category_id: Optional[int] = Query(default=None, alias="categoryId"),
    db: AsyncSession = Depends(get_db_session),
):
    result = await catalog_service.list_subcategories(db, category_id)
    return to_response(
        result,
        schema=ExpenseSubcategoryResponse,
        failure_message="Error al obtener las subcategorías de gastos",
    )


@router.get(
    "/expense-types",
    response_model=ListEnvelope[ExpenseTypeResponse],
    responses=ERRORS,
    summary="List active expense types, sorted by name",
)
async def list_expense_types(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.EXPENSE_TYPE)
    return to_response(
        result,
        schema=ExpenseTypeResponse,
        failure_message="Error al obtener los tipos de egresos",
    )


@router.get(
    "/expense-types/{expense_type_id}",
    response_model=Envelope[ExpenseTypeResponse],
    responses=ERRORS_WITH_404,
    summary="Get an active expense type",
)
async def get_expense_type(expense_type_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.get_by_id(db, CatalogKind.EXPENSE_TYPE, expense_type_id)
    return to_response(
        result,
        schema=ExpenseTypeResponse,
        not_found_message="Tipo de egreso no encontrado",
        failure_message="Error al obtener el tipo de egreso",
    )


@router.get(
    "/recurrence-types",
    response_model=ListEnvelope[RecurrenceTypeResponse],
    responses=ERRORS,
    summary="List active recurrence types",
)
async def list_recurrence_types(db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.list_active(db, CatalogKind.RECURRENCE_TYPE)
    return to_response(
        result,
        schema=RecurrenceTypeResponse,
        failure_message="Error al obtener los tipos de recurrencia",
    )


@router.get(
    "/recurrence-types/{recurrence_type_id}",
    response_model=Envelope[RecurrenceTypeResponse],
    responses=ERRORS_WITH_404,
    summary="Get an active recurrence type",
)
async def get_recurrence_type(recurrence_type_id: int, db: AsyncSession = Depends(get_db_session)):
    result = await catalog_service.get_by_id(db, CatalogKind.RECURRENCE_TYPE, recurrence_type_id)
    return to_response(
        result,
        schema=RecurrenceTypeResponse,
        not_found_message="Tipo de recurrencia no encontrado",
        failure_message="Error al obtener el tipo de recurrencia",
    )
