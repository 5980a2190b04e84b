"""Tests for company registration."""

import pytest
from httpx import AsyncClient

from src.marketplace.core.db import Database
from src.marketplace.models import Company
from src.marketplace.repositories import CompanyRepository
from tests.helpers import count_rows, get_ids

pytestmark = pytest.mark.asyncio


class TestCreateCompany:
    """Tests for POST /api/companies."""

    async def test_create_company_derives_id_from_name(
        self, client: AsyncClient, database: Database
    ) -> None:
        response = await client.post(
            "/api/companies",
            json={"name": "Acme Corp", "email": "jobs@acme.example.com", "image": "logo.png"},
        )

        assert response.status_code == 201
        assert response.json() == {
            "_id": "acmecorp",
            "name": "Acme Corp",
            "email": "jobs@acme.example.com",
            "image": "logo.png",
        }
        assert await get_ids(database, Company) == {"acmecorp"}

    async def test_duplicate_email_is_rejected(
        self, client: AsyncClient, database: Database
    ) -> None:
        await client.post(
            "/api/companies", json={"name": "Acme", "email": "jobs@acme.example.com"}
        )

        response = await client.post(
            "/api/companies", json={"name": "Other", "email": "jobs@acme.example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Company email already exists"}
        assert await count_rows(database, Company) == 1

    async def test_name_collision_is_rejected(
        self, client: AsyncClient, database: Database
    ) -> None:
        """Names that normalise to the same id cannot both be registered."""
        await client.post(
            "/api/companies", json={"name": "Acme Corp", "email": "a@acme.example.com"}
        )

        response = await client.post(
            "/api/companies", json={"name": "acmecorp", "email": "b@acme.example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Company name already taken"}
        assert await count_rows(database, Company) == 1

    async def test_whitespace_name_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/companies", json={"name": "   ", "email": "blank@example.com"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"

    async def test_invalid_email_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/companies", json={"name": "Acme", "email": "not-an-email"}
        )

        assert response.status_code == 400

    async def test_image_is_optional(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/companies", json={"name": "No Logo", "email": "nologo@example.com"}
        )

        assert response.status_code == 201
        assert response.json()["image"] == ""


class TestCreateCompanyRace:
    """Unique-key conflicts that only surface at commit time."""

    async def test_name_lost_race_reports_name(
        self,
        client: AsyncClient,
        database: Database,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        await client.post(
            "/api/companies", json={"name": "Acme", "email": "a@acme.example.com"}
        )

        async def _not_found(self, id):
            return None

        # Pre-check misses the row, as if it was inserted concurrently
        monkeypatch.setattr(CompanyRepository, "get_by_id", _not_found)

        response = await client.post(
            "/api/companies", json={"name": "ACME", "email": "b@acme.example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Company name already taken"}
        assert await count_rows(database, Company) == 1

    async def test_email_lost_race_reports_email(
        self,
        client: AsyncClient,
        database: Database,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        await client.post(
            "/api/companies", json={"name": "Acme", "email": "jobs@acme.example.com"}
        )

        original = CompanyRepository.get_by_email
        calls = 0

        async def _miss_first_lookup(self, email):
            nonlocal calls
            calls += 1
            if calls == 1:
                return None
            return await original(self, email)

        monkeypatch.setattr(CompanyRepository, "get_by_email", _miss_first_lookup)

        response = await client.post(
            "/api/companies", json={"name": "Other", "email": "jobs@acme.example.com"}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Company email already exists"}
        assert await count_rows(database, Company) == 1
