"""Tests for model column mapping against the database."""

import pytest

from src.marketplace.core.db import Database
from src.marketplace.models import Application, User
from src.marketplace.models.base import utc_now
from tests.helpers import create_user

pytestmark = pytest.mark.asyncio


class TestTimestamps:
    """Timestamps are naive UTC, matching TIMESTAMP WITHOUT TIME ZONE in the migration."""

    @pytest.mark.parametrize("model", [User, Application])
    async def test_timestamp_columns_are_naive(self, model) -> None:
        for column in ("created_at", "updated_at"):
            assert model.__table__.c[column].type.timezone is False

    async def test_user_created_at_round_trips(self, database: Database) -> None:
        user = await create_user(database)

        async with database.session() as session:
            stored = await session.get(User, user.id)

        assert stored is not None
        assert stored.created_at == user.created_at
        assert stored.created_at.tzinfo is None

    async def test_application_created_at_round_trips(self, database: Database) -> None:
        created_at = utc_now()
        application = Application(
            user_id="u1", project_id="p1", solution_link="s", created_at=created_at
        )
        async with database.session() as session:
            session.add(application)
            await session.commit()

        async with database.session() as session:
            stored = await session.get(Application, application.id)

        assert stored is not None
        assert stored.created_at == created_at
