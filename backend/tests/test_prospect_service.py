"""
Back Office Backend — Prospect Service Tests
==============================================

What we test:
    ✅ Create then get returns the stored lead
    ✅ Same mail twice is two leads
    ✅ Prospects list newest first
    ✅ Missing ids return Ok(None) for the endpoint to map
"""

import pytest

from backoffice.results import Ok
from backoffice.schemas.prospect import ProspectCreate
from backoffice.services.prospect_service import ProspectService


class TestProspectService:

    def setup_method(self):
        self.service = ProspectService()

    @pytest.mark.asyncio
    async def test_create_and_get(self, db_session):
        created = await self.service.create(
            db_session,
            ProspectCreate(name="Jane Doe", mail="jane@example.com", enterprise="ACME"),
        )

        fetched = await self.service.get_by_id(db_session, created.value.id)

        assert fetched.value.name == "Jane Doe"
        assert fetched.value.enterprise == "ACME"
        assert fetched.value.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_mail_allowed(self, db_session):
        first = await self.service.create(db_session, ProspectCreate(name="A", mail="a@example.com"))
        second = await self.service.create(db_session, ProspectCreate(name="A", mail="a@example.com"))
        assert first.value.id != second.value.id

    @pytest.mark.asyncio
    async def test_list_newest_first(self, db_session):
        for name in ("Primero", "Segundo", "Tercero"):
            await self.service.create(db_session, ProspectCreate(name=name, mail="x@example.com"))

        result = await self.service.list_all(db_session)

        assert [p.name for p in result.value] == ["Tercero", "Segundo", "Primero"]

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, db_session):
        assert await self.service.get_by_id(db_session, 404) == Ok(None)
