"""Test helper functions for common data creation patterns."""

from sqlmodel import SQLModel, func, select

from src.marketplace.core.db import Database
from src.marketplace.models import Company, Project, User
from tests.factories import CompanyFactory, ProjectFactory, UserFactory


async def create_user(database: Database, **user_kwargs) -> User:
    """Create and commit a user.

    Args:
        database: Connected test database
        **user_kwargs: Args passed to UserFactory

    Returns:
        Created user
    """
    user = UserFactory.build(**user_kwargs)
    async with database.session() as session:
        session.add(user)
        await session.commit()
    return user


async def create_company_with_projects(
    database: Database,
    project_count: int = 1,
    **company_kwargs,
) -> tuple[Company, list[Project]]:
    """Create a company and some projects it owns.

    Returns:
        Tuple of (company, projects)
    """
    company = CompanyFactory.build(**company_kwargs)
    projects = [
        ProjectFactory.build(company_id=company.id, title=f"Project {i}")
        for i in range(project_count)
    ]
    async with database.session() as session:
        session.add(company)
        await session.flush()
        session.add_all(projects)
        await session.commit()
    return company, projects


async def count_rows(database: Database, model: type[SQLModel]) -> int:
    """Count rows in a model's table."""
    async with database.session() as session:
        result = await session.execute(select(func.count()).select_from(model))
        return int(result.scalar_one())


async def get_ids(database: Database, model: type[SQLModel]) -> set[str]:
    """Get the primary keys currently stored for a model."""
    async with database.session() as session:
        result = await session.execute(select(model.id))  # type: ignore[attr-defined]
        return set(result.scalars().all())
