"""Database session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.db import Database


def get_database(request: Request) -> Database:
    """Get the database handle opened by the application lifespan."""
    return request.app.state.db


async def get_db_session(
    database: Annotated[Database, Depends(get_database)],
) -> AsyncGenerator[AsyncSession]:
    """Get a database session for the current request."""
    async with database.session() as session:
        yield session


DatabaseDep = Annotated[Database, Depends(get_database)]
DBSession = Annotated[AsyncSession, Depends(get_db_session)]
