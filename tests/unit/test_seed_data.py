"""Consistency checks for the bundled dataset and the fallback listing."""

import pytest

from src.marketplace.core.validators import company_id_from_name
from src.marketplace.data import seed_data
from src.marketplace.models import JoinStatus
from src.marketplace.services.project_service import fallback_projects

pytestmark = pytest.mark.unit


def _company_ids() -> set[str]:
    return {c["id"] for c in seed_data.COMPANIES}


def test_company_ids_are_derived_from_names():
    for company in seed_data.COMPANIES:
        assert company["id"] == company_id_from_name(company["name"])


def test_company_emails_are_unique():
    emails = [c["email"] for c in seed_data.COMPANIES]
    assert len(emails) == len(set(emails))


@pytest.mark.parametrize(
    "rows",
    [
        seed_data.PROJECTS,
        seed_data.MANAGE_PROJECTS,
        seed_data.PROJECTS_JOINED,
        seed_data.VIEW_APPLICATIONS,
    ],
)
def test_rows_reference_bundled_companies(rows):
    for row in rows:
        assert row["company_id"] in _company_ids()


def test_ids_are_unique_across_tables():
    ids = [
        row["id"]
        for rows in (
            seed_data.PROJECTS,
            seed_data.MANAGE_PROJECTS,
            seed_data.PROJECTS_JOINED,
            seed_data.VIEW_APPLICATIONS,
        )
        for row in rows
    ]
    assert len(ids) == len(set(ids))


def test_joined_statuses_are_valid():
    valid = {status.value for status in JoinStatus}
    for row in seed_data.PROJECTS_JOINED:
        assert row["status"] in valid
        assert "user_id" not in row


class TestFallbackProjects:
    def test_one_entry_per_bundled_project(self):
        projects = fallback_projects()
        assert {p.id for p in projects} == {p["id"] for p in seed_data.PROJECTS}

    def test_ordered_by_title(self):
        titles = [p.title for p in fallback_projects()]
        assert titles == sorted(titles)

    def test_company_is_expanded(self):
        for project in fallback_projects():
            assert project.company_id is not None
            assert project.company_id.id in _company_ids()

    def test_serialized_shape_matches_live_listing(self):
        data = fallback_projects()[0].model_dump(mode="json", by_alias=True)
        assert set(data) == {
            "_id",
            "title",
            "description",
            "location",
            "category",
            "level",
            "date",
            "companyId",
        }
        assert set(data["companyId"]) == {"_id", "name", "email"}
