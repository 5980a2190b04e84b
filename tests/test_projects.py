"""Tests for project listing and administration."""

import pytest
from httpx import AsyncClient

from src.marketplace.core.db import Database
from src.marketplace.data import seed_data
from src.marketplace.models import Project
from src.marketplace.repositories import ProjectRepository
from src.marketplace.services.project_service import fallback_projects
from tests.helpers import count_rows, create_company_with_projects, get_ids

pytestmark = pytest.mark.asyncio


def _fail_query(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _broken(self):
        raise ConnectionError("database unreachable")

    monkeypatch.setattr(ProjectRepository, "list_with_company", _broken)


def _fallback_json() -> list[dict]:
    return [p.model_dump(mode="json", by_alias=True) for p in fallback_projects()]


class TestListProjects:
    """Tests for GET /api/projects."""

    async def test_empty_database_serves_fallback(self, client: AsyncClient) -> None:
        response = await client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == _fallback_json()
        assert len(response.json()) == len(seed_data.PROJECTS)

    async def test_live_projects_have_company_expanded(
        self, client: AsyncClient, database: Database
    ) -> None:
        company, projects = await create_company_with_projects(
            database, project_count=2, name="Acme", email="jobs@acme.example.com"
        )

        response = await client.get("/api/projects")

        assert response.status_code == 200
        data = response.json()
        assert [p["_id"] for p in data] == [p.id for p in projects]
        assert data[0]["companyId"] == {
            "_id": company.id,
            "name": "Acme",
            "email": "jobs@acme.example.com",
        }
        assert set(data[0]) == set(_fallback_json()[0])

    async def test_query_failure_serves_fallback_and_reports(
        self,
        client: AsyncClient,
        monkeypatch: pytest.MonkeyPatch,
        reported: list,
    ) -> None:
        _fail_query(monkeypatch)

        response = await client.get("/api/projects")

        assert response.status_code == 200
        assert response.json() == _fallback_json()
        assert len(reported) == 1
        assert isinstance(reported[0][0], ConnectionError)
        assert reported[0][1]["operation"] == "list_projects"


class TestAdminProjects:
    """Tests for /api/admin/projects."""

    async def test_admin_listing_has_no_fallback(self, client: AsyncClient) -> None:
        response = await client.get("/api/admin/projects")

        assert response.status_code == 200
        assert response.json() == []

    async def test_admin_listing_returns_projects(
        self, client: AsyncClient, database: Database
    ) -> None:
        _, projects = await create_company_with_projects(database, project_count=3)

        response = await client.get("/api/admin/projects")

        assert response.status_code == 200
        assert {p["_id"] for p in response.json()} == {p.id for p in projects}

    async def test_admin_listing_failure_returns_500(
        self,
        client: AsyncClient,
        monkeypatch: pytest.MonkeyPatch,
        reported: list,
    ) -> None:
        _fail_query(monkeypatch)

        response = await client.get(
            "/api/admin/projects", headers={"Origin": "https://app.example.com"}
        )

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "Server error"
        assert response.headers["access-control-allow-origin"] == "*"
        assert "error" in data
        assert "request_id" in data
        assert len(reported) == 1

    async def test_delete_project(self, client: AsyncClient, database: Database) -> None:
        _, projects = await create_company_with_projects(database, project_count=2)

        response = await client.delete(f"/api/admin/projects/{projects[0].id}")

        assert response.status_code == 200
        assert response.json() == {"message": "Project deleted successfully"}
        assert await get_ids(database, Project) == {projects[1].id}

    async def test_delete_missing_project_changes_nothing(
        self, client: AsyncClient, database: Database
    ) -> None:
        await create_company_with_projects(database, project_count=2)

        response = await client.delete("/api/admin/projects/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"message": "Project not found"}
        assert await count_rows(database, Project) == 2
