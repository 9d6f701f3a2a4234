"""
Back Office Backend — Catalog Service Tests
=============================================

What we test:
    ✅ Active catalogs hide inactive rows, in listings and by id
    ✅ Expense types come back sorted by name, recurrence types by value
    ✅ Subcategory filter, including an unknown category (empty, not an error)
    ✅ Store failures become Unexpected, roll back, and are logged
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from backoffice.models.catalog import (
    BankEntity,
    ExpenseCategory,
    ExpenseSubcategory,
    ExpenseType,
    PaymentMethod,
    RecurrenceType,
)
from backoffice.results import NotFound, Ok, Unexpected
from backoffice.services.catalog_service import CatalogKind, CatalogService


class TestCatalogServiceWithDatabase:

    def setup_method(self):
        self.service = CatalogService()

    @pytest.mark.asyncio
    async def test_expense_types_active_only_sorted_by_name(self, db_session, seed):
        await seed(
            ExpenseType(name="Inversión", code="investment"),
            ExpenseType(name="Archivado", code="archived", is_active=False),
            ExpenseType(name="Gasto Operacional", code="expense"),
            ExpenseType(name="Costo de Producción", code="cost"),
        )

        result = await self.service.list_active(db_session, CatalogKind.EXPENSE_TYPE)

        assert isinstance(result, Ok)
        assert [row.code for row in result.value] == ["cost", "expense", "investment"]
        assert all(row.is_active for row in result.value)

    @pytest.mark.asyncio
    async def test_inactive_expense_type_is_not_found_by_id(self, db_session, seed):
        [archived] = await seed(ExpenseType(name="Archivado", code="archived", is_active=False))

        result = await self.service.get_by_id(db_session, CatalogKind.EXPENSE_TYPE, archived.id)

        assert result == NotFound(resource="expense_type", resource_id=archived.id)

    @pytest.mark.asyncio
    async def test_never_created_id_is_not_found(self, db_session):
        result = await self.service.get_by_id(db_session, CatalogKind.RECURRENCE_TYPE, 999)
        assert isinstance(result, NotFound)

    @pytest.mark.asyncio
    async def test_recurrence_types_sorted_by_value(self, db_session, seed):
        await seed(
            RecurrenceType(value="mensual", description="Cada mes"),
            RecurrenceType(value="anual", description="Cada año"),
            RecurrenceType(value="bimestral", description="Cada 2 meses", is_active=False),
        )

        result = await self.service.list_active(db_session, CatalogKind.RECURRENCE_TYPE)

        assert [row.value for row in result.value] == ["anual", "mensual"]

    @pytest.mark.asyncio
    async def test_plain_catalog_keeps_insertion_order(self, db_session, seed):
        await seed(PaymentMethod(name="Transferencia"), PaymentMethod(name="Efectivo"))

        result = await self.service.list_active(db_session, CatalogKind.PAYMENT_METHOD)

        assert [row.name for row in result.value] == ["Transferencia", "Efectivo"]

    @pytest.mark.asyncio
    async def test_create_then_get_returns_same_row(self, db_session):
        created = await self.service.create(db_session, CatalogKind.BANK_ENTITY, {"name": "Banco Estado"})
        assert isinstance(created, Ok)
        assert created.value.id is not None

        fetched = await self.service.get_by_id(db_session, CatalogKind.BANK_ENTITY, created.value.id)
        assert fetched.value.name == "Banco Estado"

    @pytest.mark.asyncio
    async def test_bank_entities_sorted_by_name(self, db_session, seed):
        await seed(BankEntity(name="Santander"), BankEntity(name="BCI"), BankEntity(name="Itaú"))

        result = await self.service.list_active(db_session, CatalogKind.BANK_ENTITY)

        assert [row.name for row in result.value] == ["BCI", "Itaú", "Santander"]


class TestSubcategories:

    def setup_method(self):
        self.service = CatalogService()

    @pytest.mark.asyncio
    async def test_all_subcategories_without_filter(self, db_session, seed):
        [food] = await seed(ExpenseCategory(name="Alimentos"))
        await seed(
            ExpenseSubcategory(name="Verduras", expense_category_id=food.id),
            ExpenseSubcategory(name="Carnes", expense_category_id=food.id),
        )

        result = await self.service.list_subcategories(db_session)

        assert [row.name for row in result.value] == ["Carnes", "Verduras"]

    @pytest.mark.asyncio
    async def test_filter_by_category(self, db_session, seed):
        food, office = await seed(ExpenseCategory(name="Alimentos"), ExpenseCategory(name="Oficina"))
        await seed(
            ExpenseSubcategory(name="Verduras", expense_category_id=food.id),
            ExpenseSubcategory(name="Papelería", expense_category_id=office.id),
        )

        result = await self.service.list_subcategories(db_session, office.id)

        assert [row.name for row in result.value] == ["Papelería"]

    @pytest.mark.asyncio
    async def test_unknown_category_is_empty(self, db_session):
        result = await self.service.list_subcategories(db_session, 4242)
        assert result == Ok([])


class TestCatalogServiceFailures:

    def setup_method(self):
        self.logger = MagicMock()
        self.service = CatalogService(logger=self.logger)

    @pytest.mark.asyncio
    async def test_store_error_becomes_unexpected(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError(
            "SELECT", {}, Exception("connection reset")
        )

        result = await self.service.list_active(mock_db_session, CatalogKind.BANK_ENTITY)

        assert isinstance(result, Unexpected)
        assert result.operation == "list bank_entity"
        assert "OperationalError" in result.detail
        mock_db_session.rollback.assert_awaited_once()
        self.logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_failed_insert_becomes_unexpected(self, mock_db_session):
        mock_db_session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

        result = await self.service.create(mock_db_session, CatalogKind.BANK_ENTITY, {"name": "BCI"})

        assert isinstance(result, Unexpected)
        mock_db_session.rollback.assert_awaited_once()
