"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sample.application.interfaces import MessageRepositoryInterface
from sample.database import get_session
from sample.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemyMessageRepository,
)

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_message_repository(session: SessionDep) -> MessageRepositoryInterface:
    """Bind a message repository to the request's database session."""

    return SQLAlchemyMessageRepository(session)


MessageRepositoryDep = Annotated[
    MessageRepositoryInterface,
    Depends(get_message_repository),
]
